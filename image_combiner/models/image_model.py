"""Модели данных для загруженных изображений.

Принципы:
- SRP: только структура данных, без логики обработки.
- Чистый код: неизменяемость (`frozen=True`) для предсказуемости.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

from PIL import Image


@dataclass(frozen=True)
class ImageData:
    """Неизменяемая модель загруженного изображения.

    Fields:
        path: Путь к исходному файлу.
        pil_image: Декодированное изображение PIL (в режиме RGBA).
        width: Ширина, px.
        height: Высота, px.
        format: Контейнерный формат файла, например "PNG".
    """
    path: Path
    pil_image: Image.Image
    width: int
    height: int
    format: str

    @property
    def dimensions(self) -> Tuple[int, int]:
        return self.width, self.height
