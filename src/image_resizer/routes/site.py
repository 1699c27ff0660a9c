"""Static site route factory: built assets, sitemap and the page fallback.

Must be included after every other router, its catch-all GET shadows
anything registered later.
"""

from pathlib import Path

from fastapi import APIRouter, Request, Response
from fastapi.responses import FileResponse
from fastapi.templating import Jinja2Templates
from loguru import logger

from ..common.state import ResizerState
from ..config import Settings
from ..sitemap import default_entries, render_sitemap
from .pages import render_page

XML_MEDIA_TYPE = "application/xml"


def resolve_asset(root: Path, relative_path: str) -> Path | None:
    """File under ``root`` for a request path, or None.

    Paths that resolve outside ``root`` (``..``, symlinks) are refused.
    """
    base = root.resolve()
    try:
        candidate = (base / relative_path.lstrip("/")).resolve()
    except (OSError, ValueError):
        return None
    if not candidate.is_relative_to(base) or not candidate.is_file():
        return None
    return candidate


def create_router(settings: Settings, templates: Jinja2Templates) -> APIRouter:
    router = APIRouter()

    def generated_sitemap() -> str:
        return render_sitemap(default_entries(settings.site_url, settings.sitemap_lastmod))

    @router.get("/sitemap.xml")
    def sitemap_xml() -> Response:
        """Serve the hand-written sitemap file as application/xml."""
        if settings.sitemap_file.is_file():
            xml = settings.sitemap_file.read_text(encoding="utf-8")
        else:
            logger.warning(f"Sitemap file not found: {settings.sitemap_file}, serving generated one")
            xml = generated_sitemap()
        return Response(content=xml, media_type=XML_MEDIA_TYPE)

    @router.get("/api/sitemap")
    def api_sitemap() -> Response:
        return Response(content=generated_sitemap(), media_type=XML_MEDIA_TYPE)

    @router.get("/{full_path:path}", response_model=None)
    async def static_or_page(request: Request, full_path: str) -> Response:
        """Serve a built asset, or the tool page for any other path."""
        asset = resolve_asset(settings.static_dir, full_path)
        if asset is not None:
            return FileResponse(asset)
        return render_page(request, templates, ResizerState(quality=settings.default_quality))

    _ = (sitemap_xml, api_sitemap, static_or_page)

    return router
