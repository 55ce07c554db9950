"""
Build a raw site document from scraped page content.

The document uses the same camelCase shape as hand-written config files and
still has to pass ``validate_config`` before rendering.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Dict
from urllib.parse import urlparse

from ..api.firecrawl import ScrapeResult
from .models import is_hex_color

logger = logging.getLogger(__name__)

DEFAULT_PRIMARY_COLOR = "#2B7FFF"
TAGLINE_LIMIT = 100
CONTENT_LIMIT = 2000

_WORD_START = re.compile(r"\b\w")
_MARKDOWN_CHARS = re.compile(r"[#*`]")

DEFAULT_STATS = [
    {"value": "10+", "label": "Års erfaring"},
    {"value": "100+", "label": "Prosjekter"},
    {"value": "Norge", "label": "Landsdekkende"},
]

DEFAULT_FEATURES = [
    {"title": "Kvalitet", "description": "Vi leverer alltid kvalitet"},
    {"title": "Pålitelighet", "description": "Vi holder det vi lover"},
    {"title": "Kompetanse", "description": "Erfarne fagfolk"},
    {"title": "Lokal", "description": "Lokal tilstedeværelse"},
]

DEFAULT_VALUES = DEFAULT_FEATURES[:3]


def company_name_from_url(url: str) -> str:
    """
    Derive a display name from the first label of the host name.

    ``https://www.bygg-service.no`` becomes ``"Bygg Service"``.
    """
    host = urlparse(url if "//" in url else f"//{url}").hostname or ""
    host = re.sub(r"^www\.", "", host)
    label = host.split(".")[0].replace("-", " ")
    return _WORD_START.sub(lambda match: match.group(0).upper(), label)


def _default_services() -> list[Dict[str, Any]]:
    return [
        {
            "title": f"Tjeneste {index}",
            "description": f"Beskrivelse av tjeneste {index}",
            "features": ["Feature 1", "Feature 2"],
        }
        for index in range(1, 4)
    ]


def build_config_document(scrape: ScrapeResult, url: str) -> Dict[str, Any]:
    """
    Create a site document from a scrape result.

    Company identity comes from the URL, colors from the scraped branding
    (falling back to a default blue when missing or not ``#RRGGBB``), the
    tagline from the first non-blank markdown line and the about text from the
    markdown stripped of ``#``, ``*`` and backticks. Stats, features, services
    and values use fixed Norwegian placeholder copy.

    Args:
        scrape: Content returned by the acquisition provider.
        url: Page the content was scraped from.

    Returns:
        A raw document ready for ``validate_config``.
    """
    name = company_name_from_url(url)
    lines = [line.strip() for line in scrape.markdown.split("\n") if line.strip()]
    tagline = lines[0][:TAGLINE_LIMIT] if lines else ""
    content = _MARKDOWN_CHARS.sub("", scrape.markdown).strip()[:CONTENT_LIMIT]

    primary = scrape.brand_colors.get("primary")
    if not is_hex_color(primary):
        if primary:
            logger.warning("Ignoring scraped primary color %r; using %s", primary, DEFAULT_PRIMARY_COLOR)
        primary = DEFAULT_PRIMARY_COLOR
    accent = scrape.brand_colors.get("accent")
    if not is_hex_color(accent):
        accent = primary

    return {
        "company": {
            "name": name,
            "fullName": f"{name} AS",
            "tagline": tagline,
            "phone": "",
            "email": "",
            "address": "",
        },
        "branding": {
            "primaryColor": primary,
            "accentColor": accent,
        },
        "pages": {
            "home": {
                "hero": {
                    "title": name,
                    "subtitle": tagline,
                    "primaryCta": "Kontakt oss",
                    "secondaryCta": "Les mer",
                },
                "stats": [dict(stat) for stat in DEFAULT_STATS],
                "features": [dict(feature) for feature in DEFAULT_FEATURES],
            },
            "services": {
                "title": "Våre tjenester",
                "subtitle": "Vi tilbyr",
                "intro": "Vi tilbyr et bredt spekter av tjenester.",
                "services": _default_services(),
            },
            "about": {
                "title": "Om oss",
                "subtitle": f"Velkommen til {name}",
                "content": content or f"Vi er {name}. Vi leverer kvalitetstjenester til våre kunder.",
                "values": [dict(value) for value in DEFAULT_VALUES],
            },
            "contact": {
                "contacts": [],
            },
        },
    }
