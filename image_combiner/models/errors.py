"""Ошибки конвейера объединения изображений.

Принципы:
- Каждый вид сбоя — отдельный класс, несущий только нужные для сообщения данные.
- `ImageDataError` — общий предок пользовательских ошибок: CLI ловит только его.
- `PixelWindowOutOfBounds` сюда не входит: это нарушение внутреннего инварианта.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional


class ImageDataError(Exception):
    """Базовая ошибка обработки пары изображений."""


class DifferentImageFormats(ImageDataError):
    def __init__(self, format_1: Optional[str], format_2: Optional[str]) -> None:
        super().__init__(f"Форматы изображений различаются: {format_1} и {format_2}")
        self.format_1 = format_1
        self.format_2 = format_2


class UnableToReadImageFromPath(ImageDataError):
    def __init__(self, path: str | Path, io_error: OSError) -> None:
        super().__init__(f"Не удалось прочитать файл {path}: {io_error}")
        self.path = Path(path)
        self.io_error = io_error


class UnableToFormatImage(ImageDataError):
    def __init__(self, path: str | Path) -> None:
        super().__init__(f"Не удалось определить формат изображения: {path}")
        self.path = Path(path)


class UnableToDecodeImage(ImageDataError):
    def __init__(self, path: str | Path, codec_error: Exception) -> None:
        super().__init__(f"Не удалось декодировать изображение {path}: {codec_error}")
        self.path = Path(path)
        self.codec_error = codec_error


class BufferTooSmall(ImageDataError):
    """Данные не помещаются в заявленную ёмкость выходного буфера.

    Сигнализирует об ошибке в расчёте размеров, а не об ошибке пользователя.
    """

    def __init__(self, capacity: int, size: int) -> None:
        super().__init__(f"Буфер слишком мал: ёмкость {capacity} байт, данные {size} байт")
        self.capacity = capacity
        self.size = size


class UnableToSaveImage(ImageDataError):
    def __init__(self, path: str | Path, codec_error: Exception) -> None:
        super().__init__(f"Не удалось сохранить изображение {path}: {codec_error}")
        self.path = Path(path)
        self.codec_error = codec_error


class PixelWindowOutOfBounds(AssertionError):
    """Окно из 4 байт вышло за границы буфера при чередовании пикселей.

    Возможно только при дефекте выше по конвейеру (длины буферов не совпали).
    """

    def __init__(self, offset: int, length: int) -> None:
        super().__init__(f"Index out of bounds: окно [{offset}, {offset + 4}) при длине буфера {length}")
        self.offset = offset
        self.length = length
