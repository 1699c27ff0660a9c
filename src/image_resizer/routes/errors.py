"""Translation of image_resizer errors to HTTP responses."""

from urllib.parse import quote

from fastapi import HTTPException, status

from ..errors import (
    ImageDecodeError,
    ImageResizerError,
    InvalidDataURLError,
    UnsupportedMediaTypeError,
    UploadTooLargeError,
)

STATUS_CODES: dict[type[ImageResizerError], int] = {
    ImageDecodeError: status.HTTP_400_BAD_REQUEST,
    InvalidDataURLError: status.HTTP_400_BAD_REQUEST,
    UnsupportedMediaTypeError: status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
    UploadTooLargeError: status.HTTP_413_CONTENT_TOO_LARGE,
}


def status_for(exc: ImageResizerError) -> int:
    for exc_type, code in STATUS_CODES.items():
        if isinstance(exc, exc_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def to_http_exception(exc: ImageResizerError) -> HTTPException:
    return HTTPException(status_code=status_for(exc), detail=str(exc))


def content_disposition(filename: str) -> str:
    """``attachment`` header value that survives non-ASCII filenames."""
    fallback = filename.encode("ascii", "replace").decode("ascii").replace('"', "")
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename)}"
