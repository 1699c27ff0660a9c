"""JSON route factory for the resize pipeline."""

from typing import Annotated

from fastapi import APIRouter, File, Form, HTTPException, Response, UploadFile, status
from loguru import logger

from ..algo.image_resize import fit_dimensions
from ..common.schemas import ImageFormat, LoadedImage, ResampleFilter, ResizeResult
from ..common.state import ResizerState
from ..common.uploads import read_upload
from ..config import Settings
from ..errors import ImageResizerError
from .errors import content_disposition, to_http_exception


def create_router(settings: Settings) -> APIRouter:
    """Create router with injected settings.

    Args:
        settings: Upload and dimension limits, default quality

    Returns:
        Configured APIRouter with load, resize and download endpoints
    """
    router = APIRouter()

    async def run_resize(
        file: UploadFile,
        width: int | None,
        height: int | None,
        format: ImageFormat,
        quality: int,
        resample: ResampleFilter,
    ) -> ResizerState:
        if width is None and height is None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="At least one of width or height is required",
            )

        state = ResizerState(
            format=format,
            quality=quality,
            resample=resample,
            max_dimension=settings.max_dimension,
        )
        try:
            data = await read_upload(file, settings.max_upload_bytes)
            original = state.load(data, file.filename or "image", file.content_type)
        except ImageResizerError as exc:
            raise to_http_exception(exc) from exc

        target_width, target_height = fit_dimensions(
            original.natural_width, original.natural_height, width, height
        )
        if max(target_width, target_height) > settings.max_dimension:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Output may not exceed {settings.max_dimension}px per side",
            )

        state.set_aspect_lock(False)
        state.set_width(target_width)
        state.set_height(target_height)
        if state.resize() is None:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Resize produced no result",
            )
        return state

    @router.post("/images", response_model=LoadedImage)
    async def load_image(
        file: Annotated[UploadFile, File(description="Image file to load")],
    ) -> LoadedImage:
        """Decode an upload and report its natural size as a previewable data URL."""
        state = ResizerState()
        try:
            data = await read_upload(file, settings.max_upload_bytes)
            return state.load(data, file.filename or "image", file.content_type)
        except ImageResizerError as exc:
            raise to_http_exception(exc) from exc

    @router.post("/resize", response_model=ResizeResult)
    async def resize_image(
        file: Annotated[UploadFile, File(description="Image file to resize")],
        width: Annotated[
            int | None, Form(gt=0, le=settings.max_dimension, description="Target width in pixels")
        ] = None,
        height: Annotated[
            int | None, Form(gt=0, le=settings.max_dimension, description="Target height in pixels")
        ] = None,
        format: Annotated[ImageFormat, Form(description="Output encoding")] = ImageFormat.PNG,
        quality: Annotated[
            int, Form(ge=1, le=100, description="Quality for JPEG/WebP (1-100)")
        ] = settings.default_quality,
        resample: Annotated[ResampleFilter, Form(description="Scaling filter")] = (
            ResampleFilter.BICUBIC
        ),
    ) -> ResizeResult:
        """Resize an upload; a missing dimension follows the aspect ratio."""
        state = await run_resize(file, width, height, format, quality, resample)
        result = state.result
        if result is None:
            raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
        logger.info(
            f"Resized {result.filename}: {result.width}x{result.height}, {result.byte_size} bytes"
        )
        return result

    @router.post("/resize/download")
    async def download_resized(
        file: Annotated[UploadFile, File(description="Image file to resize")],
        width: Annotated[
            int | None, Form(gt=0, le=settings.max_dimension, description="Target width in pixels")
        ] = None,
        height: Annotated[
            int | None, Form(gt=0, le=settings.max_dimension, description="Target height in pixels")
        ] = None,
        format: Annotated[ImageFormat, Form(description="Output encoding")] = ImageFormat.PNG,
        quality: Annotated[
            int, Form(ge=1, le=100, description="Quality for JPEG/WebP (1-100)")
        ] = settings.default_quality,
        resample: Annotated[ResampleFilter, Form(description="Scaling filter")] = (
            ResampleFilter.BICUBIC
        ),
    ) -> Response:
        """Resize an upload and return the encoded bytes as an attachment."""
        state = await run_resize(file, width, height, format, quality, resample)
        download = state.download()
        if download is None:
            raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response(
            content=download.data,
            media_type=download.mime_type,
            headers={"Content-Disposition": content_disposition(download.filename)},
        )

    # Mark functions as used (accessed via FastAPI decorator)
    _ = (load_image, resize_image, download_resized)

    return router
