"""Точка входа в приложение."""
from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from typing import Optional, Sequence

from image_combiner.config import MergeSettings
from image_combiner.controllers.merge_controller import MergeController
from image_combiner.models.errors import ImageDataError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="image-combiner",
        description="Объединяет два изображения одного формата, чередуя их пиксели.",
    )
    parser.add_argument("image_1", help="Путь к первому изображению")
    parser.add_argument("image_2", help="Путь ко второму изображению")
    parser.add_argument("output", help="Путь для сохранения результата")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Подробный лог (DEBUG)")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Только предупреждения и ошибки")
    return parser


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Разбирает аргументы, запускает объединение и возвращает код выхода."""
    args = build_parser().parse_args(argv)

    settings = MergeSettings.from_env()
    if args.verbose:
        settings = replace(settings, log_level="DEBUG")
    elif args.quiet:
        settings = replace(settings, log_level="WARNING")
    configure_logging(settings.log_level)

    controller = MergeController(settings=settings)
    try:
        controller.run(args.image_1, args.image_2, args.output)
    except ImageDataError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
