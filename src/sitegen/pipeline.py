"""
End-to-end generation: validate, render, materialize.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Union

from .config import SiteConfig, load_config, validate_config
from .render import render_site
from .web import MaterializeReport, materialize_project
from .web.materializer import DEFAULT_OUTPUT_ROOT

logger = logging.getLogger(__name__)

ConfigSource = Union[SiteConfig, Mapping, Path, str]


def resolve_config(source: ConfigSource) -> SiteConfig:
    """
    Turn a config file path, a raw document or a SiteConfig into a SiteConfig.

    Raises:
        ConfigError: If the document is missing required fields or malformed.
    """
    if isinstance(source, SiteConfig):
        return source
    if isinstance(source, Mapping):
        return validate_config(source)
    return load_config(source)


def generate_site(
    source: ConfigSource,
    template_root: Path | str,
    output_root: Path | str = DEFAULT_OUTPUT_ROOT,
    *,
    force: bool = False,
) -> MaterializeReport:
    """
    Generate a site project from a config.

    Validation completes before anything touches the filesystem, so an invalid
    config never leaves an output directory behind.

    Args:
        source: Path to a JSON/TOML document, a parsed document, or a SiteConfig.
        template_root: Template project tree to clone.
        output_root: Directory that receives ``<slug>/``.
        force: Overwrite an output path claimed by another company.

    Returns:
        The MaterializeReport of the generated project.
    """
    config = resolve_config(source)
    logger.info("Generating site for %s (slug %s)", config.company.name, config.slug)
    rendered = render_site(config)
    return materialize_project(config, template_root, output_root, force=force, rendered=rendered)


def describe_config(config: SiteConfig) -> list[tuple[str, str]]:
    """Key/value rows summarising a SiteConfig for console tables."""
    pages = config.pages
    return [
        ("Company", config.company.name),
        ("Slug", config.slug),
        ("Primary color", config.branding.primary_color),
        ("Accent color", config.branding.accent_color),
        ("Stats", str(len(pages.home.stats))),
        ("Features", str(len(pages.home.features))),
        ("Services", str(len(pages.services.services))),
        ("About section", "yes" if pages.about is not None else "no"),
        ("Config hash", config.hash),
    ]
