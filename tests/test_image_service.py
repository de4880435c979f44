import pytest
from PIL import Image

from image_combiner.models.errors import (
    UnableToDecodeImage,
    UnableToFormatImage,
    UnableToReadImageFromPath,
    UnableToSaveImage,
)
from image_combiner.models.floating_image import FloatingImage
from image_combiner.services.image_service import ImageService


@pytest.fixture
def service():
    return ImageService()


# ------------------------------
# Загрузка
# ------------------------------

def test_load_png(service, make_image):
    path = make_image("a.png", size=(5, 3))
    data = service.load_image(path)
    assert data.format == "PNG"
    assert data.pil_image.mode == "RGBA"
    assert data.dimensions == (5, 3)


def test_load_jpeg_is_converted_to_rgba(service, make_image):
    data = service.load_image(make_image("a.jpg", format="JPEG"))
    assert data.format == "JPEG"
    assert data.pil_image.mode == "RGBA"


def test_load_mpo_reported_as_jpeg(service, make_image):
    path = make_image("camera.jpg", format="MPO")
    with Image.open(path) as raw:
        assert raw.format == "MPO"
    data = service.load_image(path)
    assert data.format == "JPEG"
    assert data.pil_image.mode == "RGBA"


def test_load_missing_path(service, tmp_path):
    with pytest.raises(UnableToReadImageFromPath) as info:
        service.load_image(tmp_path / "missing.png")
    assert isinstance(info.value.io_error, FileNotFoundError)


def test_load_directory(service, tmp_path):
    with pytest.raises(UnableToReadImageFromPath):
        service.load_image(tmp_path)


def test_load_unrecognised_content(service, tmp_path):
    path = tmp_path / "notes.png"
    path.write_text("definitely not an image")
    with pytest.raises(UnableToFormatImage) as info:
        service.load_image(path)
    assert info.value.path == path


def test_load_truncated_png(service, noise_png):
    content = noise_png.read_bytes()
    noise_png.write_bytes(content[: len(content) // 2])
    with pytest.raises(UnableToDecodeImage):
        service.load_image(noise_png)


# ------------------------------
# Сохранение
# ------------------------------

def _two_pixels(path):
    output = FloatingImage(2, 1, path)
    output.set_data(bytes([255, 0, 0, 255, 0, 0, 255, 128]))
    return output


def test_save_png(service, tmp_path):
    target = tmp_path / "out.png"
    assert service.save_image(_two_pixels(target), "png") == target
    with Image.open(target) as saved:
        assert saved.format == "PNG"
        assert saved.size == (2, 1)
        assert saved.convert("RGBA").tobytes() == bytes([255, 0, 0, 255, 0, 0, 255, 128])


def test_save_jpeg_drops_alpha(service, tmp_path):
    target = tmp_path / "out.jpg"
    service.save_image(_two_pixels(target), "JPEG")
    with Image.open(target) as saved:
        assert saved.format == "JPEG"
        assert saved.mode == "RGB"


def test_save_short_data_fails_without_file(service, tmp_path):
    target = tmp_path / "out.png"
    output = FloatingImage(4, 4, target)
    output.set_data(bytes(8))
    with pytest.raises(UnableToSaveImage):
        service.save_image(output, "PNG")
    assert not target.exists()


def test_save_unknown_format(service, tmp_path):
    target = tmp_path / "out.xyz"
    with pytest.raises(UnableToSaveImage):
        service.save_image(_two_pixels(target), "NOT-A-FORMAT")
    assert not target.exists()


def test_save_into_missing_directory(service, tmp_path):
    with pytest.raises(UnableToSaveImage) as info:
        service.save_image(_two_pixels(tmp_path / "nope" / "out.png"), "PNG")
    assert isinstance(info.value.codec_error, OSError)
