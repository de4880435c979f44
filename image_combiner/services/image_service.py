"""Загрузка изображений с диска и сохранение результата.

Принципы:
- SRP: класс отвечает только за декодирование/кодирование и извлечение свойств.
- Исключения Pillow и ОС переводятся в ошибки из `image_combiner.models.errors` здесь, на границе.
- Сохранение — единственная запись на диск: файл пишется целиком после успешного кодирования.
"""
from __future__ import annotations

import errno
import os
import struct
from io import BytesIO
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from image_combiner.models.errors import (
    UnableToDecodeImage,
    UnableToFormatImage,
    UnableToReadImageFromPath,
    UnableToSaveImage,
)
from image_combiner.models.floating_image import FloatingImage
from image_combiner.models.image_model import ImageData

# Контейнеры без альфа-канала: RGBA8 кодируется в них без альфы
FORMATS_WITHOUT_ALPHA = frozenset({"JPEG", "PPM"})
# Pillow называет JPEG с маркером Multi-Picture (камеры Fujifilm, Nikon) "MPO"
FORMAT_ALIASES = {"MPO": "JPEG"}


class ImageService:
    def load_image(self, file_path: str | Path) -> ImageData:
        """Загружает изображение с диска и возвращает его вместе с метаданными.

        Args:
            file_path: Путь до файла изображения.

        Returns:
            `ImageData` c `PIL.Image.Image` (в режиме RGBA), размерами и форматом контейнера.

        Raises:
            UnableToReadImageFromPath: если путь не существует или файл нельзя прочитать.
            UnableToFormatImage: если формат файла не распознан.
            UnableToDecodeImage: если формат распознан, но данные повреждены.
        """
        path = Path(file_path)
        if not path.is_file():
            raise UnableToReadImageFromPath(
                path, FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path))
            )

        try:
            source = Image.open(path)
        except UnidentifiedImageError as exc:
            # UnidentifiedImageError — подкласс OSError, ловим раньше
            raise UnableToFormatImage(path) from exc
        except Image.DecompressionBombError as exc:
            raise UnableToDecodeImage(path, exc) from exc
        except OSError as exc:
            raise UnableToReadImageFromPath(path, exc) from exc

        with source:
            image_format = FORMAT_ALIASES.get(source.format, source.format)
            if not image_format:
                raise UnableToFormatImage(path)
            try:
                pil_image = source.convert("RGBA")
            except (OSError, SyntaxError, ValueError, struct.error, Image.DecompressionBombError) as exc:
                raise UnableToDecodeImage(path, exc) from exc

        width, height = pil_image.size
        return ImageData(
            path=path,
            pil_image=pil_image,
            width=width,
            height=height,
            format=image_format,
        )

    def save_image(self, image: FloatingImage, image_format: str) -> Path:
        """Кодирует RGBA8-данные `image` в `image_format` и пишет файл `image.name`.

        Args:
            image: Выходное изображение с заполненными данными.
            image_format: Контейнерный формат Pillow, например "PNG".

        Returns:
            Путь к записанному файлу.

        Raises:
            UnableToSaveImage: при ошибке кодирования или записи; при ошибке кодирования файл не создаётся.
        """
        path = Path(image.name)
        image_format = image_format.upper()
        try:
            pil_image = Image.frombytes("RGBA", (image.width, image.height), image.data)
            if image_format in FORMATS_WITHOUT_ALPHA:
                pil_image = pil_image.convert("RGB")
            encoded = BytesIO()
            pil_image.save(encoded, format=image_format)
        except (OSError, ValueError, KeyError) as exc:
            raise UnableToSaveImage(path, exc) from exc

        try:
            path.write_bytes(encoded.getvalue())
        except OSError as exc:
            raise UnableToSaveImage(path, exc) from exc
        return path
