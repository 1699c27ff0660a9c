"""Unit tests for schemas and display helpers."""

import pytest
from pydantic import ValidationError

from image_resizer.common.schemas import (
    ImageFormat,
    LoadedImage,
    ResampleFilter,
    ResizeParams,
    format_byte_size,
    resized_filename,
)

# ============================================================================
# ImageFormat
# ============================================================================


def test_image_format_properties():
    """Test MIME types and extensions per encoding."""
    assert ImageFormat.PNG.mime_type == "image/png"
    assert ImageFormat.JPEG.mime_type == "image/jpeg"
    assert ImageFormat.WEBP.mime_type == "image/webp"
    assert ImageFormat.JPEG.extension == "jpg"
    assert ImageFormat.WEBP.extension == "webp"


def test_image_format_lossy():
    """Test only JPEG and WebP take a quality."""
    assert ImageFormat.PNG.is_lossy is False
    assert ImageFormat.JPEG.is_lossy is True
    assert ImageFormat.WEBP.is_lossy is True


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("png", ImageFormat.PNG),
        ("JPG", ImageFormat.JPEG),
        ("jpeg", ImageFormat.JPEG),
        ("image/webp", ImageFormat.WEBP),
        (ImageFormat.WEBP, ImageFormat.WEBP),
    ],
)
def test_image_format_parse(value: str, expected: ImageFormat):
    """Test parse accepts names, aliases and MIME types."""
    assert ImageFormat.parse(value) == expected


# ============================================================================
# ResizeParams / LoadedImage
# ============================================================================


def test_resize_params_defaults():
    """Test ResizeParams has correct default values."""
    params = ResizeParams(width=10, height=20)

    assert params.format == ImageFormat.PNG
    assert params.quality == 92
    assert params.resample == ResampleFilter.BICUBIC


@pytest.mark.parametrize(
    "kwargs",
    [
        {"width": 0, "height": 10},
        {"width": 10, "height": 16385},
        {"width": 10, "height": 10, "quality": 0},
        {"width": 10, "height": 10, "quality": 101},
        {"width": 10, "height": 10, "format": "gif"},
    ],
)
def test_resize_params_validation(kwargs: dict[str, object]):
    """Test ResizeParams rejects out-of-range values."""
    with pytest.raises(ValidationError):
        _ = ResizeParams.model_validate(kwargs)


def test_loaded_image_aspect_ratio():
    """Test LoadedImage exposes the natural aspect ratio."""
    image = LoadedImage(
        filename="a.png",
        mime_type="image/png",
        data_url="data:image/png;base64,",
        natural_width=800,
        natural_height=600,
        byte_size=0,
    )

    assert image.aspect_ratio == pytest.approx(4 / 3)


# ============================================================================
# Helpers
# ============================================================================


@pytest.mark.parametrize(
    ("original", "format", "expected"),
    [
        ("photo.heic", ImageFormat.JPEG, "resized_photo.jpg"),
        ("archive.tar.png", ImageFormat.WEBP, "resized_archive.tar.webp"),
        ("C:\\Users\\me\\cat.bmp", ImageFormat.PNG, "resized_cat.png"),
        ("", ImageFormat.PNG, "resized_image.png"),
    ],
)
def test_resized_filename(original: str, format: ImageFormat, expected: str):
    """Test download names keep the stem and swap the extension."""
    assert resized_filename(original, format) == expected


@pytest.mark.parametrize(
    ("size", "expected"),
    [
        (0, "0 B"),
        (1023, "1023 B"),
        (1024, "1.0 KB"),
        (1536, "1.5 KB"),
        (5 * 1024 * 1024, "5.0 MB"),
        (3 * 1024**3, "3.0 GB"),
    ],
)
def test_format_byte_size(size: int, expected: str):
    """Test human-readable byte sizes."""
    assert format_byte_size(size) == expected
