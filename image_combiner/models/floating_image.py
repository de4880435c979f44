"""Выходное изображение, данные которого появляются позже его размеров."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from image_combiner.models.errors import BufferTooSmall
from image_combiner.models.pixel_buffer import BYTES_PER_PIXEL


@dataclass
class FloatingImage:
    """Результат объединения: размеры и имя известны заранее, данные — после.

    Fields:
        width: Ширина, px.
        height: Высота, px.
        name: Путь, по которому изображение будет сохранено.
        max_bytes: Заявленная ёмкость буфера, `width * height * 4`.
        data: Пиксели RGBA8; пусто до вызова `set_data`.
    """
    width: int
    height: int
    name: str | Path
    max_bytes: int = field(init=False)
    data: bytes = field(init=False, default=b"")

    def __post_init__(self) -> None:
        self.max_bytes = self.width * self.height * BYTES_PER_PIXEL

    def set_data(self, data: bytes) -> None:
        """Присваивает данные, проверяя ёмкость.

        Raises:
            BufferTooSmall: если данные длиннее `max_bytes`; текущие данные не меняются.
        """
        if len(data) > self.max_bytes:
            raise BufferTooSmall(capacity=self.max_bytes, size=len(data))
        self.data = bytes(data)
