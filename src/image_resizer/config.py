"""Runtime settings, read from ``IMAGE_RESIZER_*`` environment variables.

A ``.env`` file in the working directory is loaded first (if present), so
local overrides do not need to be exported by hand.
"""

import os
from collections.abc import Mapping
from datetime import date
from pathlib import Path
from typing import ClassVar

from dotenv import load_dotenv
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .common.schemas import MAX_DIMENSION
from .errors import ConfigError

PACKAGE_DIR = Path(__file__).parent

ENV_PREFIX = "IMAGE_RESIZER_"

DEFAULT_SITE_URL = "https://image-resizer-js.vercel.app"
DEFAULT_SITEMAP_LASTMOD = date(2025, 7, 26)


class Settings(BaseModel):
    """Server and pipeline configuration."""

    host: str = Field(default="127.0.0.1", description="Interface to bind")
    port: int = Field(default=3000, ge=1, le=65535, description="Port to listen on")
    site_url: str = Field(default=DEFAULT_SITE_URL, description="Public base URL used in the sitemap")
    static_dir: Path = Field(
        default=PACKAGE_DIR / "static",
        description="Built assets served from the site root",
    )
    sitemap_file: Path = Field(
        default=PACKAGE_DIR / "public" / "sitemap.xml",
        description="Hand-written sitemap returned by /sitemap.xml",
    )
    sitemap_lastmod: date = Field(default=DEFAULT_SITEMAP_LASTMOD)
    max_upload_bytes: int = Field(default=20 * 1024 * 1024, gt=0)
    max_dimension: int = Field(
        default=MAX_DIMENSION,
        gt=0,
        le=MAX_DIMENSION,
        description="Largest output width/height",
    )
    default_quality: int = Field(default=92, ge=1, le=100)
    log_level: str = Field(default="INFO")

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        _ = logger.level(level)  # raises ValueError for unknown levels
        return level

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        dotenv: bool = True,
    ) -> "Settings":
        """Build settings from the environment.

        Raises:
            ConfigError: If a variable does not validate
        """
        if environ is None:
            if dotenv:
                _ = load_dotenv()
            environ = os.environ

        values = {
            key[len(ENV_PREFIX) :].lower(): value
            for key, value in environ.items()
            if key.startswith(ENV_PREFIX) and value != ""
        }
        unknown = set(values) - set(cls.model_fields)
        for key in sorted(unknown):
            del values[key]

        try:
            return cls.model_validate(values)
        except ValidationError as exc:
            raise ConfigError(f"Invalid configuration: {exc}") from exc
