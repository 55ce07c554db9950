"""
Text rendering for the stylesheet and the TSX pages.
"""

from .pages import render_about, render_contact, render_home, render_services
from .site import RenderedSite, render_site
from .theme import render_theme

__all__ = [
    "RenderedSite",
    "render_about",
    "render_contact",
    "render_home",
    "render_services",
    "render_site",
    "render_theme",
]
