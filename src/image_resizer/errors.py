"""Exception hierarchy for image_resizer."""

from typing_extensions import override


class ImageResizerError(Exception):
    """Base class for all errors raised by image_resizer."""

    def __init__(self, message: str = "Image resizer error."):
        self.message: str = message
        super().__init__(self.message)

    @override
    def __str__(self):
        return self.message


class ImageDecodeError(ImageResizerError):
    """Input bytes could not be decoded to pixels."""


class InvalidDataURLError(ImageResizerError):
    """A string is not a base64 ``data:`` URL."""


class UnsupportedMediaTypeError(ImageResizerError):
    """An upload was not declared as an image."""


class UploadTooLargeError(ImageResizerError):
    """An upload exceeded the configured size limit."""

    def __init__(self, limit: int):
        self.limit: int = limit
        super().__init__(f"Upload exceeds the {limit} byte limit")


class ConfigError(ImageResizerError):
    """Settings from the environment are missing or malformed."""
