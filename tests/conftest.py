from pathlib import Path

import numpy as np
import pytest
from PIL import Image

RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 255)


@pytest.fixture
def make_image(tmp_path):
    """Пишет однотонное изображение в tmp_path и возвращает путь к нему."""
    def _make(name: str, size=(4, 4), color=RED, format: str = "PNG") -> Path:
        path = tmp_path / name
        mode = "RGB" if format in ("JPEG", "MPO") else "RGBA"
        fill = color[:3] if mode == "RGB" else color
        image = Image.new(mode, size, fill)
        if format == "MPO":
            # Pillow читает файл как MPO, только если в нём больше одного кадра
            image.save(path, format=format, save_all=True, append_images=[image.copy()])
        else:
            image.save(path, format=format)
        return path
    return _make


@pytest.fixture
def noise_png(tmp_path) -> Path:
    """PNG 64x64 из случайного шума: плохо сжимается, удобно обрезать."""
    rng = np.random.default_rng(7)
    arr = rng.integers(0, 256, size=(64, 64, 4), dtype=np.uint8)
    path = tmp_path / "noise.png"
    Image.fromarray(arr).save(path, format="PNG")
    return path
