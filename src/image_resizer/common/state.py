"""ResizerState - transient UI state for a single page view.

Nothing here is meaningful until an image has been loaded; the operations
that need an image quietly do nothing without one.
"""

from loguru import logger
from pydantic import BaseModel, Field, PrivateAttr

from ..algo.image_resize import decode_image, image_resize, sniff_mime_type
from .data_url import decode_data_url, encode_data_url
from .schemas import (
    MAX_DIMENSION,
    ImageFormat,
    LoadedImage,
    ResampleFilter,
    ResizeParams,
    ResizeResult,
    resized_filename,
)


class Download(BaseModel):
    """Encoded result as an attachment."""

    filename: str
    mime_type: str
    data: bytes


class ResizerState(BaseModel):
    """Original image, requested output and encoded result for one page view."""

    original: LoadedImage | None = None
    width: int | None = Field(default=None, gt=0, le=MAX_DIMENSION)
    height: int | None = Field(default=None, gt=0, le=MAX_DIMENSION)
    aspect_locked: bool = True
    format: ImageFormat = ImageFormat.PNG
    quality: int = Field(default=92, ge=1, le=100)
    resample: ResampleFilter = ResampleFilter.BICUBIC
    max_dimension: int = Field(default=MAX_DIMENSION, gt=0, le=MAX_DIMENSION)
    result: ResizeResult | None = None

    _encoded: bytes | None = PrivateAttr(default=None)

    @property
    def has_image(self) -> bool:
        return self.original is not None

    @property
    def has_result(self) -> bool:
        return self.result is not None

    @property
    def params(self) -> ResizeParams | None:
        """Requested output, once an image and both dimensions are present."""
        if self.original is None or not self.width or not self.height:
            return None
        return ResizeParams(
            width=self.width,
            height=self.height,
            format=self.format,
            quality=self.quality,
            resample=self.resample,
        )

    # ---------------------------
    # Loading
    # ---------------------------
    def load(self, data: bytes, filename: str, content_type: str | None = None) -> LoadedImage:
        """Load a new original, replacing any previous image and result.

        Raises:
            ImageDecodeError: If ``data`` is not a decodable image
        """
        image = decode_image(data)
        mime_type = sniff_mime_type(data)
        unknown = mime_type == "application/octet-stream"
        if unknown and content_type and content_type.startswith("image/"):
            mime_type = content_type

        self.original = LoadedImage(
            filename=filename or "image",
            mime_type=mime_type,
            data_url=encode_data_url(data, mime_type),
            natural_width=image.width,
            natural_height=image.height,
            byte_size=len(data),
        )
        self.width, self.height = self._fit(image.width, image.height)
        self.result = None
        self._encoded = None

        logger.debug(
            f"Loaded {self.original.filename}: {image.width}x{image.height}, {len(data)} bytes"
        )
        return self.original

    def load_data_url(self, url: str, filename: str) -> LoadedImage:
        """Load an original that is already a data URL.

        Raises:
            InvalidDataURLError: If ``url`` is not a base64 data URL
            ImageDecodeError: If the payload is not a decodable image
        """
        mime_type, data = decode_data_url(url)
        return self.load(data, filename, mime_type)

    # ---------------------------
    # Requested output
    # ---------------------------
    def set_width(self, width: int) -> None:
        if self.original is None:
            return
        if self.aspect_locked:
            self.width, self.height = self._fit(width, round(width / self.original.aspect_ratio))
        else:
            self.width = self._clamp(width)

    def set_height(self, height: int) -> None:
        if self.original is None:
            return
        if self.aspect_locked:
            self.width, self.height = self._fit(round(height * self.original.aspect_ratio), height)
        else:
            self.height = self._clamp(height)

    def set_aspect_lock(self, locked: bool) -> None:
        self.aspect_locked = locked

    def set_format(self, format: ImageFormat | str) -> None:
        self.format = ImageFormat.parse(format)

    def set_quality(self, quality: int) -> None:
        if not 1 <= quality <= 100:
            raise ValueError(f"Quality must be between 1 and 100, got {quality}")
        self.quality = quality

    # ---------------------------
    # Resize / download
    # ---------------------------
    def resize(self) -> ResizeResult | None:
        """Run the pipeline on the loaded image; ``None`` if inputs are absent."""
        params = self.params
        if self.original is None or params is None:
            return None

        _, data = decode_data_url(self.original.data_url)
        encoded = image_resize(
            data=data,
            width=params.width,
            height=params.height,
            format=params.format,
            quality=params.quality,
            resample=params.resample,
        )

        self._encoded = encoded.data
        self.result = ResizeResult(
            filename=resized_filename(self.original.filename, encoded.format),
            format=encoded.format,
            mime_type=encoded.mime_type,
            width=encoded.width,
            height=encoded.height,
            data_url=encode_data_url(encoded.data, encoded.mime_type),
            byte_size=encoded.byte_size,
        )
        return self.result

    def download(self) -> Download | None:
        if self.result is None or self._encoded is None:
            return None
        return Download(
            filename=self.result.filename,
            mime_type=self.result.mime_type,
            data=self._encoded,
        )

    # ---------------------------
    # Limits
    # ---------------------------
    def _clamp(self, value: int) -> int:
        return max(1, min(int(value), self.max_dimension))

    def _fit(self, width: int, height: int) -> tuple[int, int]:
        """Scale ``(width, height)`` down to ``max_dimension``, keeping proportions."""
        longest = max(width, height)
        if longest > self.max_dimension:
            scale = self.max_dimension / longest
            width, height = round(width * scale), round(height * scale)
        return self._clamp(width), self._clamp(height)
