"""Unit tests for settings loaded from the environment."""

from datetime import date
from pathlib import Path

import pytest

from image_resizer.config import PACKAGE_DIR, Settings
from image_resizer.errors import ConfigError


def test_settings_defaults():
    """Test defaults match the packaged site."""
    settings = Settings.from_env({})

    assert settings.host == "127.0.0.1"
    assert settings.port == 3000
    assert settings.site_url == "https://image-resizer-js.vercel.app"
    assert settings.static_dir == PACKAGE_DIR / "static"
    assert settings.sitemap_file == PACKAGE_DIR / "public" / "sitemap.xml"
    assert settings.sitemap_lastmod == date(2025, 7, 26)
    assert settings.default_quality == 92
    assert settings.max_dimension == 16384


def test_settings_from_env_overrides(tmp_path: Path):
    """Test IMAGE_RESIZER_* variables override defaults."""
    settings = Settings.from_env(
        {
            "IMAGE_RESIZER_PORT": "8080",
            "IMAGE_RESIZER_STATIC_DIR": str(tmp_path),
            "IMAGE_RESIZER_SITEMAP_LASTMOD": "2026-01-02",
            "IMAGE_RESIZER_MAX_UPLOAD_BYTES": "1024",
            "IMAGE_RESIZER_LOG_LEVEL": "debug",
        }
    )

    assert settings.port == 8080
    assert settings.static_dir == tmp_path
    assert settings.sitemap_lastmod == date(2026, 1, 2)
    assert settings.max_upload_bytes == 1024
    assert settings.log_level == "DEBUG"


def test_settings_ignores_unrelated_and_empty_variables():
    """Test unknown prefixed names, other variables and blanks are skipped."""
    settings = Settings.from_env(
        {
            "PORT": "1",
            "IMAGE_RESIZER_UNKNOWN": "x",
            "IMAGE_RESIZER_HOST": "",
        }
    )

    assert settings.port == 3000
    assert settings.host == "127.0.0.1"


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("IMAGE_RESIZER_PORT", "not-a-port"),
        ("IMAGE_RESIZER_PORT", "70000"),
        ("IMAGE_RESIZER_DEFAULT_QUALITY", "0"),
        ("IMAGE_RESIZER_MAX_DIMENSION", "20000"),
        ("IMAGE_RESIZER_LOG_LEVEL", "bogus"),
    ],
)
def test_settings_invalid_values(name: str, value: str):
    """Test invalid values raise ConfigError."""
    with pytest.raises(ConfigError, match="Invalid configuration"):
        _ = Settings.from_env({name: value})


def test_settings_reads_process_environment(monkeypatch: pytest.MonkeyPatch):
    """Test os.environ is used when no mapping is given."""
    monkeypatch.setenv("IMAGE_RESIZER_PORT", "4321")

    assert Settings.from_env(dotenv=False).port == 4321
