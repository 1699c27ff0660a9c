"""FastAPI application entrypoint for image_resizer.

Run with the ``image-resizer`` console script, or
``uvicorn --factory image_resizer.main:create_app``.
"""

import uvicorn
from fastapi import FastAPI
from fastapi.templating import Jinja2Templates
from loguru import logger

from . import __version__
from .config import PACKAGE_DIR, Settings
from .routes import api, pages, site
from .utils.logging_config import configure_logging

TEMPLATES_DIR = PACKAGE_DIR / "templates"


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the app: tool page, JSON API, then the static site catch-all."""
    if settings is None:
        settings = Settings.from_env()

    app = FastAPI(title="Image Resizer", version=__version__)
    app.state.settings = settings

    templates = Jinja2Templates(directory=TEMPLATES_DIR)

    app.include_router(pages.create_router(settings, templates))
    app.include_router(api.create_router(settings), prefix="/api")
    app.include_router(site.create_router(settings, templates))

    return app


def main() -> None:
    settings = Settings.from_env()
    configure_logging(settings.log_level)

    app = create_app(settings)
    logger.info(f"Image resizer server listening on http://{settings.host}:{settings.port}")
    log_level = logger.level(settings.log_level).no
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=log_level)


if __name__ == "__main__":
    main()
