"""Test configuration and fixtures for image_resizer.

This module provides:
- Synthetic images generated with Pillow (no test media on disk)
- Settings pointing at temporary directories where a test needs them
- A FastAPI TestClient wired to the full application
"""

from collections.abc import Callable
from io import BytesIO
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from PIL import Image, ImageDraw

from image_resizer.config import Settings
from image_resizer.main import create_app

# ============================================================================
# Image Fixtures
# ============================================================================


def make_image(
    size: tuple[int, int] = (800, 600),
    format: str = "PNG",
    mode: str = "RGB",
    **save_kwargs: object,
) -> bytes:
    """Encode a patterned test image (gradient, grid and a circle)."""
    width, height = size
    color = (73, 109, 137, 255) if mode == "RGBA" else (73, 109, 137)
    img = Image.new(mode, size, color=color)
    draw = ImageDraw.Draw(img)

    for x in range(0, width, 8):
        draw.line([(x, 0), (x, height)], fill=(x % 256, 255 - x % 256, 90), width=1)
    for y in range(0, height, 50):
        draw.line([(0, y), (width, y)], fill=(255, 255, 255), width=2)

    draw.ellipse(
        [width * 3 // 8, height // 3, width * 5 // 8, height * 2 // 3],
        fill=(200, 100, 100),
    )

    buffer = BytesIO()
    img.save(buffer, format=format, **save_kwargs)
    return buffer.getvalue()


@pytest.fixture
def image_factory() -> Callable[..., bytes]:
    """Provide :func:`make_image` for tests that need custom images."""
    return make_image


@pytest.fixture
def png_bytes() -> bytes:
    """800x600 RGB PNG."""
    return make_image()


@pytest.fixture
def jpeg_bytes() -> bytes:
    """800x600 JPEG."""
    return make_image(format="JPEG", quality=90)


@pytest.fixture
def rgba_png_bytes() -> bytes:
    """Semi-transparent 100x100 PNG."""
    img = Image.new("RGBA", (100, 100), color=(255, 0, 0, 128))
    buffer = BytesIO()
    img.save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def rotated_jpeg_bytes() -> bytes:
    """40x20 JPEG whose EXIF orientation (6) says to rotate it 90 degrees."""
    img = Image.new("RGB", (40, 20), color=(10, 200, 30))
    exif = Image.Exif()
    exif[0x0112] = 6
    buffer = BytesIO()
    img.save(buffer, format="JPEG", exif=exif.tobytes())
    return buffer.getvalue()


# ============================================================================
# Application Fixtures
# ============================================================================


@pytest.fixture
def settings() -> Settings:
    """Default settings (packaged static assets and sitemap)."""
    return Settings()


@pytest.fixture
def static_dir(tmp_path: Path) -> Path:
    """Temporary built-assets directory with one page and one stylesheet."""
    root = tmp_path / "static"
    root.mkdir()
    (root / "about.html").write_text("<h1>About</h1>", encoding="utf-8")
    (root / "css").mkdir()
    (root / "css" / "site.css").write_text("body {}", encoding="utf-8")
    (tmp_path / "secret.txt").write_text("do not serve", encoding="utf-8")
    return root


@pytest.fixture
def api_client(settings: Settings) -> TestClient:
    """Provide FastAPI TestClient for route testing."""
    return TestClient(create_app(settings))


@pytest.fixture
def client_factory() -> Callable[[Settings], TestClient]:
    """Build a TestClient for custom settings."""

    def factory(custom: Settings) -> TestClient:
        return TestClient(create_app(custom))

    return factory
