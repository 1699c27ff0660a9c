"""Base64 ``data:`` URL encoding, as produced by FileReader and canvas exports."""

import base64
import binascii

from ..errors import InvalidDataURLError

_PREFIX = "data:"
_BASE64_MARKER = ";base64"


def encode_data_url(data: bytes, mime_type: str) -> str:
    encoded = base64.b64encode(data).decode("ascii")
    return f"{_PREFIX}{mime_type};base64,{encoded}"


def decode_data_url(url: str) -> tuple[str, bytes]:
    """Split a base64 data URL into ``(mime_type, bytes)``.

    Raises:
        InvalidDataURLError: If ``url`` is not a base64 data URL
    """
    url = url.strip()
    if not url.startswith(_PREFIX) or "," not in url:
        raise InvalidDataURLError("Not a data URL")

    header, _, payload = url[len(_PREFIX) :].partition(",")
    if not header.endswith(_BASE64_MARKER):
        raise InvalidDataURLError("Only base64 data URLs are supported")

    # Parameters such as ";charset=..." may sit between the type and marker
    mime_type = header[: -len(_BASE64_MARKER)].split(";", 1)[0] or "application/octet-stream"

    try:
        data = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise InvalidDataURLError(f"Malformed base64 payload: {exc}") from exc

    return mime_type, data
