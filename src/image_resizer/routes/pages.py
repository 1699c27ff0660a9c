"""Route factory for the single tool page."""

from typing import Literal

from fastapi import APIRouter, Request, status
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from loguru import logger
from pydantic import BaseModel, Field, ValidationError
from starlette.datastructures import UploadFile

from ..common.schemas import ImageFormat, format_byte_size
from ..common.state import ResizerState
from ..common.uploads import read_upload
from ..config import Settings
from ..errors import ImageResizerError
from .errors import status_for


class PageForm(BaseModel):
    """Text fields of the tool page form. Size fields stay raw number-input text."""

    image_src: str = Field(default="", description="Previously loaded original (data URL)")
    filename: str = ""
    width: str = ""
    height: str = ""
    previous_width: str = ""
    previous_height: str = ""
    aspect_locked: bool = False
    format: ImageFormat = ImageFormat.PNG
    quality: int = Field(default=92, ge=1, le=100)
    action: Literal["load", "resize"] = "resize"


def parse_dimension(text: str | None) -> int | None:
    """Number-input value to a pixel count; blank or invalid -> None."""
    try:
        value = int((text or "").strip())
    except ValueError:
        return None
    return value if value > 0 else None


def apply_dimensions(
    state: ResizerState,
    width: int | None,
    height: int | None,
    previous_width: int | None = None,
    previous_height: int | None = None,
) -> None:
    """Apply the submitted size fields to ``state``.

    With the aspect ratio locked only one field can win: the height drives
    when it is the only field that changed since the page was rendered,
    otherwise the width does.
    """
    if width is None and height is None:
        return

    if not state.aspect_locked:
        if width is not None:
            state.set_width(width)
        if height is not None:
            state.set_height(height)
        return

    width_edited = width is not None and width != previous_width
    height_edited = height is not None and height != previous_height
    if height is not None and (width is None or (height_edited and not width_edited)):
        state.set_height(height)
    elif width is not None:
        state.set_width(width)


def render_page(
    request: Request,
    templates: Jinja2Templates,
    state: ResizerState,
    error: str | None = None,
    status_code: int = status.HTTP_200_OK,
) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "state": state,
            "error": error,
            "formats": list(ImageFormat),
            "format_byte_size": format_byte_size,
        },
        status_code=status_code,
    )


def create_router(settings: Settings, templates: Jinja2Templates) -> APIRouter:
    router = APIRouter()

    @router.get("/", response_class=HTMLResponse)
    async def index(request: Request) -> HTMLResponse:
        """Render the empty tool page."""
        return render_page(request, templates, ResizerState(quality=settings.default_quality))

    @router.post("/", response_class=HTMLResponse)
    async def submit(request: Request) -> HTMLResponse:
        """Load and/or resize, then re-render the page with the new state.

        The form is read by hand: the previously loaded original travels back
        as a data URL field, larger than Starlette's default part limit.
        """
        max_part_size = settings.max_upload_bytes * 4 // 3 + 1024
        async with request.form(max_part_size=max_part_size) as form:
            file = form.get("file")
            fields = {
                key: value
                for key, value in form.items()
                if key != "file" and isinstance(value, str) and value != ""
            }

            try:
                submitted = PageForm.model_validate({"quality": settings.default_quality, **fields})
            except ValidationError as exc:
                logger.warning(f"Page submission rejected: {exc}")
                return render_page(
                    request,
                    templates,
                    ResizerState(quality=settings.default_quality),
                    "Invalid form input: " + "; ".join(err["msg"] for err in exc.errors()),
                    status.HTTP_422_UNPROCESSABLE_CONTENT,
                )

            state = ResizerState(
                format=submitted.format,
                quality=submitted.quality,
                aspect_locked=submitted.aspect_locked,
                max_dimension=settings.max_dimension,
            )

            try:
                uploaded = isinstance(file, UploadFile) and bool(file.filename)
                if isinstance(file, UploadFile) and uploaded:
                    data = await read_upload(file, settings.max_upload_bytes)
                    _ = state.load(data, file.filename or "image", file.content_type)
                elif submitted.image_src:
                    _ = state.load_data_url(submitted.image_src, submitted.filename or "image")
            except ImageResizerError as exc:
                logger.warning(f"Page submission rejected: {exc}")
                return render_page(request, templates, state, str(exc), status_for(exc))

        try:
            if state.has_image and (submitted.action == "resize" or not uploaded):
                apply_dimensions(
                    state,
                    parse_dimension(submitted.width),
                    parse_dimension(submitted.height),
                    parse_dimension(submitted.previous_width),
                    parse_dimension(submitted.previous_height),
                )

            if submitted.action == "resize":
                result = state.resize()
                if result is not None:
                    logger.info(
                        f"Resized {result.filename}: {result.width}x{result.height}, "
                        + f"{result.byte_size} bytes"
                    )

        except ImageResizerError as exc:
            logger.warning(f"Page submission rejected: {exc}")
            return render_page(request, templates, state, str(exc), status_for(exc))

        return render_page(request, templates, state)

    _ = (index, submit)

    return router
