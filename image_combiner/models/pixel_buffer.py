from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from PIL import Image

BYTES_PER_PIXEL = 4  # RGBA8


@dataclass(frozen=True)
class PixelBuffer:
    """Декодированное RGBA8-изображение в виде плоского буфера (построчно).

    Fields:
        width: Ширина, px.
        height: Высота, px.
        format: Контейнерный формат источника ("PNG", "JPEG", ...), если известен.
        pixels: Байты пикселей, по 4 на пиксель.
    """
    width: int
    height: int
    format: Optional[str]
    pixels: bytes

    def __post_init__(self) -> None:
        expected = self.width * self.height * BYTES_PER_PIXEL
        if len(self.pixels) != expected:
            raise ValueError(
                f"Размер буфера {len(self.pixels)} не равен {self.width}x{self.height}x{BYTES_PER_PIXEL} = {expected}"
            )

    @property
    def dimensions(self) -> Tuple[int, int]:
        return self.width, self.height

    @classmethod
    def from_image(cls, image: Image.Image, format: Optional[str] = None) -> PixelBuffer:
        rgba = image if image.mode == "RGBA" else image.convert("RGBA")
        width, height = rgba.size
        return cls(width=width, height=height, format=format, pixels=rgba.tobytes())
