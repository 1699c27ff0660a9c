"""image_resizer - load, preview, resize and re-encode images in the browser."""

__version__ = "0.1.0"

from .algo.image_resize import EncodedImage, image_resize
from .common.schemas import (
    ImageFormat,
    LoadedImage,
    ResampleFilter,
    ResizeParams,
    ResizeResult,
)
from .common.state import Download, ResizerState
from .config import Settings
from .errors import (
    ConfigError,
    ImageDecodeError,
    ImageResizerError,
    InvalidDataURLError,
    UnsupportedMediaTypeError,
    UploadTooLargeError,
)
from .sitemap import SitemapEntry, default_entries, render_sitemap

__all__ = [
    "ConfigError",
    "Download",
    "EncodedImage",
    "ImageDecodeError",
    "ImageFormat",
    "ImageResizerError",
    "InvalidDataURLError",
    "LoadedImage",
    "ResampleFilter",
    "ResizeParams",
    "ResizeResult",
    "ResizerState",
    "Settings",
    "SitemapEntry",
    "UnsupportedMediaTypeError",
    "UploadTooLargeError",
    "__version__",
    "default_entries",
    "image_resize",
    "render_sitemap",
]
