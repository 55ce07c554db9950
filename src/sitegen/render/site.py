"""
Render every text artifact for a site in one pass.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..config.models import SiteConfig
from .pages import render_about, render_contact, render_home, render_services
from .theme import render_theme


@dataclass(frozen=True)
class RenderedSite:
    """
    Rendered artifacts for one config.

    Attributes:
        stylesheet: ``globals.css`` text.
        home: Home page TSX.
        services: Services page TSX.
        about: About page TSX.
        contact: Contact page TSX.
    """
    stylesheet: str
    home: str
    services: str
    about: str
    contact: str


def render_site(config: SiteConfig) -> RenderedSite:
    """Render the stylesheet and the four pages for a validated config."""
    return RenderedSite(
        stylesheet=render_theme(config.branding.primary_color, config.branding.accent_color),
        home=render_home(config),
        services=render_services(config),
        about=render_about(config),
        contact=render_contact(config),
    )
