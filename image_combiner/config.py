"""Настройки объединения изображений."""
from __future__ import annotations

import os
from dataclasses import dataclass, replace

from PIL import Image

from image_combiner.services.process_service import SourcePredicate, even_pixel_pattern

LOG_LEVEL_ENV = "IMAGE_COMBINER_LOG_LEVEL"


@dataclass(frozen=True)
class MergeSettings:
    """Параметры конвейера.

    Fields:
        resample_filter: Фильтр Pillow для уменьшения большего изображения.
        choose_first: Предикат индекса пикселя: True — пиксель из первого изображения.
        log_level: Уровень логирования для CLI.
    """
    resample_filter: Image.Resampling = Image.Resampling.BILINEAR
    choose_first: SourcePredicate = even_pixel_pattern
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> MergeSettings:
        settings = cls()
        level = os.environ.get(LOG_LEVEL_ENV)
        if level:
            settings = replace(settings, log_level=level.upper())
        return settings
