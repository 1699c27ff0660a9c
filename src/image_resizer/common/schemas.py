"""Pydantic schemas for images, resize parameters and results."""

from enum import StrEnum
from pathlib import PurePath
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

MAX_DIMENSION = 16384

# ─────────────────────────────────────────────────────────────
# Encodings
# ─────────────────────────────────────────────────────────────


class ImageFormat(StrEnum):
    """Output encodings offered by the tool."""

    PNG = "png"
    JPEG = "jpeg"
    WEBP = "webp"

    @property
    def mime_type(self) -> str:
        return f"image/{self.value}"

    @property
    def extension(self) -> str:
        return "jpg" if self is ImageFormat.JPEG else self.value

    @property
    def is_lossy(self) -> bool:
        return self is not ImageFormat.PNG

    @classmethod
    def parse(cls, value: "str | ImageFormat") -> "ImageFormat":
        """Accept ``jpg`` and MIME types (``image/webp``) as well as names."""
        text = str(value).strip().lower().removeprefix("image/")
        if text == "jpg":
            text = "jpeg"
        return cls(text)


class ResampleFilter(StrEnum):
    """Scaling filters; ``bicubic`` matches what browsers use for canvas draws."""

    NEAREST = "nearest"
    BILINEAR = "bilinear"
    BICUBIC = "bicubic"
    LANCZOS = "lanczos"


# ─────────────────────────────────────────────────────────────
# Images
# ─────────────────────────────────────────────────────────────


class LoadedImage(BaseModel):
    """Original image held for the lifetime of a page view."""

    filename: str = Field(description="Name of the uploaded file")
    mime_type: str = Field(description="MIME type of the original bytes")
    data_url: str = Field(description="Original bytes as a base64 data URL")
    natural_width: int = Field(gt=0)
    natural_height: int = Field(gt=0)
    byte_size: int = Field(ge=0, description="Size of the original file in bytes")

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    @property
    def aspect_ratio(self) -> float:
        return self.natural_width / self.natural_height


class ResizeParams(BaseModel):
    """Requested output of a resize."""

    width: int = Field(gt=0, le=MAX_DIMENSION, description="Target width in pixels")
    height: int = Field(gt=0, le=MAX_DIMENSION, description="Target height in pixels")
    format: ImageFormat = Field(default=ImageFormat.PNG, description="Output encoding")
    quality: int = Field(default=92, ge=1, le=100, description="Quality for lossy encodings")
    resample: ResampleFilter = Field(default=ResampleFilter.BICUBIC)


class ResizeResult(BaseModel):
    """Encoded result of a resize, ready to preview or download."""

    filename: str = Field(description="Suggested download filename")
    format: ImageFormat
    mime_type: str
    width: int = Field(gt=0)
    height: int = Field(gt=0)
    data_url: str
    byte_size: int = Field(ge=0, description="Size of the encoded bytes")

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)


def resized_filename(original: str, format: ImageFormat) -> str:
    """``photo.heic`` + JPEG -> ``resized_photo.jpg``."""
    stem = PurePath(original.replace("\\", "/")).stem or "image"
    return f"resized_{stem}.{format.extension}"


def format_byte_size(size: int) -> str:
    """Human-readable size for display, e.g. ``12.3 KB``."""
    if size < 1024:
        return f"{size} B"
    value = float(size)
    for unit in ("KB", "MB", "GB"):
        value /= 1024
        if value < 1024 or unit == "GB":
            return f"{value:.1f} {unit}"
    return f"{size} B"
