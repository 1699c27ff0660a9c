"""sitemaps.org 0.9 document generation."""

from datetime import date
from typing import Literal
from xml.sax.saxutils import escape

from pydantic import BaseModel, Field

ChangeFreq = Literal["always", "hourly", "daily", "weekly", "monthly", "yearly", "never"]

SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"


class SitemapEntry(BaseModel):
    loc: str = Field(description="Absolute URL of the page")
    lastmod: date
    changefreq: ChangeFreq = "weekly"
    priority: float = Field(default=0.5, ge=0.0, le=1.0)


def default_entries(site_url: str, lastmod: date) -> list[SitemapEntry]:
    """The tool page plus its privacy and terms pages."""
    base = site_url.rstrip("/")
    return [
        SitemapEntry(loc=f"{base}/", lastmod=lastmod, changefreq="weekly", priority=1.0),
        SitemapEntry(loc=f"{base}/privacy.html", lastmod=lastmod, changefreq="yearly", priority=0.5),
        SitemapEntry(loc=f"{base}/terms.html", lastmod=lastmod, changefreq="yearly", priority=0.5),
    ]


def render_sitemap(entries: list[SitemapEntry]) -> str:
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<urlset xmlns="{SITEMAP_NAMESPACE}">',
    ]
    for entry in entries:
        lines.extend(
            [
                "  <url>",
                f"    <loc>{escape(entry.loc)}</loc>",
                f"    <lastmod>{entry.lastmod.isoformat()}</lastmod>",
                f"    <changefreq>{entry.changefreq}</changefreq>",
                f"    <priority>{entry.priority:.1f}</priority>",
                "  </url>",
            ]
        )
    lines.append("</urlset>")
    return "\n".join(lines) + "\n"
