from enum import StrEnum


class MediaType(StrEnum):
    TEXT = "text"
    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"
    FILE = "file"

    @classmethod
    def from_mime(cls, file_type: str | None) -> "MediaType":
        if not file_type:
            return MediaType.FILE
        file_type = file_type.strip().lower()
        if file_type.startswith("image/"):
            return MediaType.IMAGE
        elif file_type.startswith("video/"):
            return MediaType.VIDEO
        elif file_type.startswith("audio/"):
            return MediaType.AUDIO
        elif file_type.startswith("text/"):
            return MediaType.TEXT
        else:
            return MediaType.FILE


def is_image_upload(content_type: str | None) -> bool:
    """Mirror of an ``accept="image/*"`` file input.

    A missing or generic ``application/octet-stream`` type is let through;
    the decoder is the real gatekeeper.
    """
    if not content_type or content_type.strip().lower() == "application/octet-stream":
        return True
    return MediaType.from_mime(content_type) == MediaType.IMAGE
