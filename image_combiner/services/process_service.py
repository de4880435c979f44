"""Приведение к общему размеру и попиксельное чередование двух изображений.

Принципы:
- SRP: только вычисления над изображениями, без ввода-вывода.
- Чистые функции: результат зависит только от входных данных.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional, Tuple

import numpy as np
from PIL import Image

from image_combiner.models.errors import PixelWindowOutOfBounds
from image_combiner.models.pixel_buffer import BYTES_PER_PIXEL, PixelBuffer

logger = logging.getLogger(__name__)

Dimensions = Tuple[int, int]
# Принимает индекс пикселя (int или np.ndarray), True — пиксель из первого изображения.
SourcePredicate = Callable[[np.ndarray], np.ndarray]


def even_pixel_pattern(index: np.ndarray) -> np.ndarray:
    """Чётные линейные индексы — из первого изображения, нечётные — из второго.

    Эквивалентно проверке `offset % 8 == 0` для байтового смещения пикселя.
    """
    return index % 2 == 0


class ProcessService:
    def __init__(self, resample_filter: Image.Resampling = Image.Resampling.BILINEAR) -> None:
        self.resample_filter = resample_filter

    # ---------- 1) Выбор целевого разрешения ----------
    def get_smallest_dimensions(self, dim_1: Dimensions, dim_2: Dimensions) -> Dimensions:
        """
        Возвращает пару с меньшей площадью (width * height).
        При равных площадях побеждает первый аргумент.
        """
        pix_1 = dim_1[0] * dim_1[1]
        pix_2 = dim_2[0] * dim_2[1]
        return dim_2 if pix_2 < pix_1 else dim_1

    # ---------- 2) Передискретизация ----------
    def resample(self, image: Image.Image, target: Dimensions) -> Image.Image:
        """
        Масштабирует изображение до `target` треугольным (билинейным) фильтром.
        Если размер уже совпадает, возвращает то же изображение без изменений.
        """
        target = (int(target[0]), int(target[1]))
        if image.size == target:
            return image
        logger.debug("Передискретизация %dx%d -> %dx%d", image.width, image.height, *target)
        return image.resize(target, self.resample_filter)

    def standardise_size(
        self,
        image_1: Image.Image,
        image_2: Image.Image,
        target: Optional[Dimensions] = None,
    ) -> Tuple[Image.Image, Image.Image]:
        """
        Приводит оба изображения к меньшему (по площади) из двух размеров
        либо к уже выбранному `target`.
        Масштабируется только то изображение, размер которого отличается от целевого.
        """
        if target is None:
            target = self.get_smallest_dimensions(image_1.size, image_2.size)
        width, height = target
        logger.info("width = %d & height = %d", width, height)
        return self.resample(image_1, (width, height)), self.resample(image_2, (width, height))

    # ---------- 3) Чередование пикселей ----------
    def alternate_pixels(
        self,
        first: bytes,
        second: bytes,
        choose_first: SourcePredicate = even_pixel_pattern,
    ) -> bytes:
        """
        Склеивает два RGBA-буфера одинаковой длины по 4 байта (один пиксель) за шаг.
        Пиксель с индексом k берётся из `first`, если `choose_first(k)` истинно, иначе из `second`.
        Буфер считается плоским: границы строк не учитываются.

        Raises:
            PixelWindowOutOfBounds: если окно из 4 байт выходит за границы одного из буферов.
        """
        if len(first) != len(second) or len(first) % BYTES_PER_PIXEL:
            shorter = min(len(first), len(second))
            raise PixelWindowOutOfBounds(offset=shorter - shorter % BYTES_PER_PIXEL, length=shorter)

        pixels_1 = np.frombuffer(first, dtype=np.uint8).reshape(-1, BYTES_PER_PIXEL)
        pixels_2 = np.frombuffer(second, dtype=np.uint8).reshape(-1, BYTES_PER_PIXEL)
        count = pixels_1.shape[0]
        # Предикат может вернуть скаляр: растягиваем на все пиксели
        mask = np.broadcast_to(np.asarray(choose_first(np.arange(count)), dtype=bool), (count,))
        merged = np.where(mask[:, None], pixels_1, pixels_2)
        return merged.tobytes()

    def combine_images(
        self,
        buffer_1: PixelBuffer,
        buffer_2: PixelBuffer,
        choose_first: SourcePredicate = even_pixel_pattern,
    ) -> bytes:
        """
        Чередует пиксели двух RGBA8-буферов.
        Ожидает, что размеры уже выровнены `standardise_size`.
        """
        return self.alternate_pixels(buffer_1.pixels, buffer_2.pixels, choose_first)
