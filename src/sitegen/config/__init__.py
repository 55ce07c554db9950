"""
Configuration helpers: site document models, validation and secrets.
"""

from .models import (
    AboutPage,
    BrandingConfig,
    CompanyConfig,
    ConfigError,
    ContactPage,
    HomePage,
    PagesConfig,
    ServicesPage,
    SiteConfig,
    load_config,
    validate_config,
)
from .settings import Secrets, get_secrets

__all__ = [
    "AboutPage",
    "BrandingConfig",
    "CompanyConfig",
    "ConfigError",
    "ContactPage",
    "HomePage",
    "PagesConfig",
    "ServicesPage",
    "SiteConfig",
    "load_config",
    "validate_config",
    "Secrets",
    "get_secrets",
]
