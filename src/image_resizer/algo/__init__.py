"""Image resize algorithms."""

from .image_resize import (
    EncodedImage,
    decode_image,
    encode_image,
    fit_dimensions,
    get_pil_format,
    image_resize,
    scale_image,
    sniff_mime_type,
)

__all__ = [
    "EncodedImage",
    "decode_image",
    "encode_image",
    "fit_dimensions",
    "get_pil_format",
    "image_resize",
    "scale_image",
    "sniff_mime_type",
]
