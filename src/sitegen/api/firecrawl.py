"""
Content acquisition through the Firecrawl scrape API.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import requests

logger = logging.getLogger(__name__)

SCRAPE_URL = "https://api.firecrawl.dev/v2/scrape"
SCRAPE_FORMATS = ["branding", "markdown"]


class AcquisitionError(RuntimeError):
    """Raised when a page cannot be scraped."""


@dataclass
class ScrapeResult:
    """
    Loosely-structured content scraped from a company web page.

    Attributes:
        brand_colors: Color roles found on the page (e.g. {"primary": "#112233"}).
        markdown: Page text as markdown.
    """
    brand_colors: Dict[str, str] = field(default_factory=dict)
    markdown: str = ""


def scrape_site(url: str, *, api_key: Optional[str], timeout: float = 60) -> ScrapeResult:
    """
    Scrape a page for brand colors and markdown content.

    Args:
        url: Page to scrape.
        api_key: Firecrawl API key.
        timeout: Request timeout in seconds.

    Returns:
        A ScrapeResult.

    Raises:
        AcquisitionError: If the key is missing, the request fails or
            Firecrawl reports an unsuccessful scrape.
    """
    if not api_key:
        raise AcquisitionError("FIRECRAWL_KEY not set")

    logger.info("Scraping %s", url)
    try:
        resp = requests.post(
            SCRAPE_URL,
            headers={"Authorization": f"Bearer {api_key}", "Content-Type": "application/json"},
            json={"url": url, "formats": SCRAPE_FORMATS},
            timeout=timeout,
        )
        resp.raise_for_status()
        payload = resp.json()
    except requests.RequestException as exc:
        raise AcquisitionError(f"Scrape request for {url} failed: {exc}") from exc
    except ValueError as exc:
        raise AcquisitionError(f"Scrape response for {url} was not JSON") from exc

    if not payload.get("success"):
        raise AcquisitionError(payload.get("error") or "Scrape failed")

    data = payload.get("data") or {}
    result = ScrapeResult(
        brand_colors=_extract_brand_colors(data.get("branding") or {}),
        markdown=data.get("markdown") or "",
    )
    logger.debug("Scraped %d chars of markdown from %s", len(result.markdown), url)
    return result


def _extract_brand_colors(branding: Dict[str, Any]) -> Dict[str, str]:
    # "colors" is either a list of palettes or a single palette object.
    colors = branding.get("colors")
    if isinstance(colors, list):
        colors = colors[0] if colors else {}
    if not isinstance(colors, dict):
        return {}
    return {role: value for role, value in colors.items() if isinstance(value, str)}
