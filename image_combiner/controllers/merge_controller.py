"""Контроллер объединения: оркестрация сервисов загрузки, обработки и сохранения.

SOLID:
- SRP: класс управляет последовательностью этапов (без логики обработки изображений).
- DIP: зависит от сервисов как от ролей; их можно подменить через конструктор.
Clean Code:
- Каждый этап короткий; тяжёлая логика вынесена в сервисы.
- Любая ошибка прерывает конвейер до записи файла: сохранение — последний шаг.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

from image_combiner.config import MergeSettings
from image_combiner.models.errors import DifferentImageFormats, ImageDataError
from image_combiner.models.floating_image import FloatingImage
from image_combiner.models.pixel_buffer import PixelBuffer
from image_combiner.services.image_service import ImageService
from image_combiner.services.process_service import ProcessService

logger = logging.getLogger(__name__)


class PipelineState(Enum):
    IDLE = "idle"
    LOADED_FIRST = "loaded_first"
    LOADED_BOTH = "loaded_both"
    FORMAT_CHECKED = "format_checked"
    RECONCILED = "reconciled"
    RESAMPLED = "resampled"
    COMBINED = "combined"
    SAVED = "saved"
    FAILED = "failed"


@dataclass
class MergeController:
    """Проводит пару изображений через все этапы и сохраняет результат.

    Ответственности:
    - Загрузка обоих изображений через `ImageService`.
    - Проверка совпадения контейнерных форматов.
    - Выбор общего размера и передискретизация через `ProcessService`.
    - Чередование пикселей и сохранение в формате первого изображения.

    Один экземпляр обслуживает одну задачу за раз: `state` и `error`
    описывают последний запуск.

    `settings.resample_filter` задаёт фильтр только для `ProcessService` по умолчанию:
    переданный явно `process_service` используется как есть, со своим фильтром.
    """
    settings: MergeSettings = field(default_factory=MergeSettings)
    image_service: ImageService = field(default_factory=ImageService)
    process_service: Optional[ProcessService] = None
    state: PipelineState = PipelineState.IDLE
    error: Optional[ImageDataError] = None

    def __post_init__(self) -> None:
        if self.process_service is None:
            self.process_service = ProcessService(resample_filter=self.settings.resample_filter)

    def run(self, image_1_path: str | Path, image_2_path: str | Path, output_path: str | Path) -> FloatingImage:
        """Объединяет два изображения и пишет результат в `output_path`.

        Returns:
            Сохранённое `FloatingImage`.

        Raises:
            ImageDataError: любой сбой этапа; `state` становится FAILED, файл не пишется.
        """
        self.state = PipelineState.IDLE
        self.error = None
        try:
            return self._run(image_1_path, image_2_path, output_path)
        except ImageDataError as exc:
            self.error = exc
            self._advance(PipelineState.FAILED)
            logger.error("Объединение не выполнено: %s", exc)
            raise

    # ---- Stages ----
    def _run(self, image_1_path: str | Path, image_2_path: str | Path, output_path: str | Path) -> FloatingImage:
        image_1 = self.image_service.load_image(image_1_path)
        self._advance(PipelineState.LOADED_FIRST)
        image_2 = self.image_service.load_image(image_2_path)
        self._advance(PipelineState.LOADED_BOTH)

        if image_1.format != image_2.format:
            raise DifferentImageFormats(image_1.format, image_2.format)
        self._advance(PipelineState.FORMAT_CHECKED)

        width, height = self.process_service.get_smallest_dimensions(image_1.dimensions, image_2.dimensions)
        self._advance(PipelineState.RECONCILED)

        pil_1, pil_2 = self.process_service.standardise_size(image_1.pil_image, image_2.pil_image, (width, height))
        self._advance(PipelineState.RESAMPLED)

        buffer_1 = PixelBuffer.from_image(pil_1, image_1.format)
        buffer_2 = PixelBuffer.from_image(pil_2, image_2.format)
        combined = self.process_service.combine_images(buffer_1, buffer_2, self.settings.choose_first)
        self._advance(PipelineState.COMBINED)

        output = FloatingImage(width, height, output_path)
        output.set_data(combined)
        # Формат первого изображения: форматы равны, а результат всегда RGBA8
        self.image_service.save_image(output, buffer_1.format)
        self._advance(PipelineState.SAVED)
        return output

    def _advance(self, state: PipelineState) -> None:
        logger.debug("%s -> %s", self.state.value, state.value)
        self.state = state
