"""Reading multipart uploads with the accept/size checks the tool applies."""

from starlette.datastructures import UploadFile

from ..errors import UnsupportedMediaTypeError, UploadTooLargeError
from ..utils.media_types import is_image_upload

CHUNK_SIZE = 1024 * 1024


async def read_upload(file: UploadFile, max_bytes: int) -> bytes:
    """Read an uploaded image fully into memory.

    Raises:
        UnsupportedMediaTypeError: If the upload is not declared as an image
        UploadTooLargeError: If the upload is larger than ``max_bytes``
    """
    if not is_image_upload(file.content_type):
        raise UnsupportedMediaTypeError(f"Expected an image, got {file.content_type}")

    chunks: list[bytes] = []
    total = 0
    while chunk := await file.read(CHUNK_SIZE):
        total += len(chunk)
        if total > max_bytes:
            raise UploadTooLargeError(max_bytes)
        chunks.append(chunk)

    return b"".join(chunks)
