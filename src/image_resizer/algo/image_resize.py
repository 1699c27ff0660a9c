"""Pure image resize pipeline: decode, scale, re-encode, measure."""

from io import BytesIO

from loguru import logger
from PIL import Image, ImageOps, UnidentifiedImageError
from pydantic import BaseModel, Field

from ..common.schemas import ImageFormat, ResampleFilter
from ..errors import ImageDecodeError
from ..utils.profiling import timed

RESAMPLE_FILTERS: dict[ResampleFilter, Image.Resampling] = {
    ResampleFilter.NEAREST: Image.Resampling.NEAREST,
    ResampleFilter.BILINEAR: Image.Resampling.BILINEAR,
    ResampleFilter.BICUBIC: Image.Resampling.BICUBIC,
    ResampleFilter.LANCZOS: Image.Resampling.LANCZOS,
}


class EncodedImage(BaseModel):
    """Output of :func:`image_resize`."""

    data: bytes
    format: ImageFormat
    width: int = Field(gt=0)
    height: int = Field(gt=0)

    @property
    def byte_size(self) -> int:
        return len(self.data)

    @property
    def mime_type(self) -> str:
        return self.format.mime_type


def get_pil_format(format_str: str) -> str:
    """Convert format string to PIL format name."""
    format_map = {
        "jpg": "JPEG",
        "jpeg": "JPEG",
        "png": "PNG",
        "webp": "WEBP",
    }
    return format_map.get(format_str.lower(), format_str.upper())


def sniff_mime_type(data: bytes) -> str:
    """MIME type of encoded image bytes, as identified by Pillow.

    Raises:
        ImageDecodeError: If Pillow does not recognise the data
    """
    try:
        with Image.open(BytesIO(data)) as img:
            return Image.MIME.get(img.format or "", "application/octet-stream")
    except (UnidentifiedImageError, OSError) as exc:
        raise ImageDecodeError(f"Unrecognised image data: {exc}") from exc


@timed
def decode_image(data: bytes) -> Image.Image:
    """
    Decode encoded bytes to an RGBA pixel buffer.

    EXIF orientation is applied so the pixels match what a browser shows
    for the same file.

    Raises:
        ImageDecodeError: If the bytes are empty, truncated, unsupported, or
            exceed Pillow's decompression-bomb limit
    """
    if not data:
        raise ImageDecodeError("No image data")

    try:
        with Image.open(BytesIO(data)) as img:
            img.load()
            oriented = ImageOps.exif_transpose(img)
            return oriented.convert("RGBA")
    except Image.DecompressionBombError as exc:
        raise ImageDecodeError(f"Image is too large to decode: {exc}") from exc
    except (UnidentifiedImageError, OSError, SyntaxError, ValueError) as exc:
        raise ImageDecodeError(f"Could not decode image: {exc}") from exc


@timed
def scale_image(
    image: Image.Image,
    width: int,
    height: int,
    resample: ResampleFilter = ResampleFilter.BICUBIC,
) -> Image.Image:
    """Draw ``image`` into a ``width`` x ``height`` surface."""
    if width <= 0 or height <= 0:
        raise ValueError(f"Target size must be positive, got {width}x{height}")

    logger.debug(f"Scaling {image.width}x{image.height} -> {width}x{height} ({resample})")
    return image.resize((width, height), RESAMPLE_FILTERS[resample])


def encode_image(
    image: Image.Image,
    format: ImageFormat | str = ImageFormat.PNG,
    quality: int = 92,
) -> bytes:
    """
    Re-encode a pixel buffer.

    Args:
        image: Pixels to encode
        format: Target encoding (png, jpeg/jpg, webp)
        quality: 1-100, used by lossy encodings only

    Returns:
        Encoded bytes
    """
    fmt = ImageFormat.parse(format)
    if not 1 <= quality <= 100:
        raise ValueError(f"Quality must be between 1 and 100, got {quality}")

    # JPEG does not support alpha channel
    if fmt is ImageFormat.JPEG and image.mode not in ("RGB", "L"):
        image = image.convert("RGB")

    save_kwargs: dict[str, object] = {}

    if fmt.is_lossy:
        save_kwargs["quality"] = quality

    if fmt is ImageFormat.PNG:
        save_kwargs["optimize"] = True

    buffer = BytesIO()
    image.save(buffer, format=get_pil_format(fmt.value), **save_kwargs)
    return buffer.getvalue()


def fit_dimensions(
    natural_width: int,
    natural_height: int,
    width: int | None = None,
    height: int | None = None,
) -> tuple[int, int]:
    """Fill in a missing dimension from the natural aspect ratio.

    Both given -> used as-is. Neither given -> natural size.
    """
    if natural_width <= 0 or natural_height <= 0:
        raise ValueError("Natural size must be positive")

    if width is None and height is None:
        return natural_width, natural_height
    if width is None:
        assert height is not None
        return max(1, round(height * natural_width / natural_height)), height
    if height is None:
        return width, max(1, round(width * natural_height / natural_width))
    return width, height


def image_resize(
    *,
    data: bytes,
    width: int | None = None,
    height: int | None = None,
    format: ImageFormat | str = ImageFormat.PNG,
    quality: int = 92,
    resample: ResampleFilter = ResampleFilter.BICUBIC,
) -> EncodedImage:
    """
    Resize a single encoded image and re-encode it.

    Framework-agnostic, single-image operation.

    Args:
        data: Encoded input bytes
        width: Target width (derived from the aspect ratio if None)
        height: Target height (derived from the aspect ratio if None)
        format: Output encoding
        quality: Quality for lossy encodings
        resample: Scaling filter

    Returns:
        The encoded output with its dimensions

    Raises:
        ImageDecodeError: If the input cannot be decoded
    """
    fmt = ImageFormat.parse(format)
    image = decode_image(data)
    target = fit_dimensions(image.width, image.height, width, height)

    scaled = scale_image(image, target[0], target[1], resample)
    encoded = encode_image(scaled, fmt, quality)

    logger.debug(f"Encoded {target[0]}x{target[1]} {fmt} ({len(encoded)} bytes)")
    return EncodedImage(data=encoded, format=fmt, width=target[0], height=target[1])
