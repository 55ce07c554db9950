"""
Pydantic models for validating and defaulting site configuration documents.
"""

from __future__ import annotations

import hashlib
import json
import re
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from ..util import slugify

HEX_COLOR_PATTERN = re.compile(r"#[0-9A-Fa-f]{6}")


class ConfigError(RuntimeError):
    """
    Raised when a site configuration cannot be loaded or validated.

    Attributes:
        field: Dotted name of the first missing/malformed field, or None when
            the failure concerns the file itself.
    """

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field


def is_hex_color(value: Any) -> bool:
    """Return True if value is a ``#RRGGBB`` string (hex digits in either case)."""
    return isinstance(value, str) and HEX_COLOR_PATTERN.fullmatch(value) is not None


class _SiteModel(BaseModel):
    """Base for all config sections: immutable, alias-aware, null-tolerant."""

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "extra": "ignore",
    }

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # Explicit nulls fall back to the field default.
        if isinstance(data, Mapping):
            return {key: value for key, value in data.items() if value is not None}
        return data


class CompanyConfig(_SiteModel):
    """
    Company identity and contact details.

    Attributes:
        name: Short company name, also the source of the project slug.
        full_name: Legal/long name shown in the footer (defaults to name).
        tagline: One-line description used as hero subtitle and footer text.
        phone: Contact phone number.
        email: Contact email address.
        address: Postal or visiting address.
    """
    name: str
    full_name: str = Field(default="", alias="fullName")
    tagline: str = ""
    phone: str = ""
    email: str = ""
    address: str = ""

    @model_validator(mode="before")
    @classmethod
    def _default_full_name(cls, data: Any) -> Any:
        if isinstance(data, Mapping) and not (data.get("fullName") or data.get("full_name")):
            data = {key: value for key, value in data.items() if key != "full_name"}
            data["fullName"] = data.get("name")
        return data


class BrandingConfig(_SiteModel):
    """
    Brand colors. Both values are ``#RRGGBB`` strings.
    """
    primary_color: str = Field(alias="primaryColor")
    accent_color: str = Field(default="", alias="accentColor")

    @model_validator(mode="before")
    @classmethod
    def _default_accent(cls, data: Any) -> Any:
        if isinstance(data, Mapping) and not (data.get("accentColor") or data.get("accent_color")):
            data = {key: value for key, value in data.items() if key != "accent_color"}
            data["accentColor"] = data.get("primaryColor", data.get("primary_color"))
        return data

    @field_validator("primary_color", "accent_color")
    @classmethod
    def _check_hex(cls, value: str) -> str:
        if not is_hex_color(value):
            raise ValueError(f"{value!r} is not a #RRGGBB color")
        return value


class HeroConfig(_SiteModel):
    title: str = ""
    subtitle: str = ""
    primary_cta: str = Field(default="", alias="primaryCta")
    secondary_cta: str = Field(default="", alias="secondaryCta")


class StatItem(_SiteModel):
    value: Union[str, int, float] = ""
    label: str = ""


class FeatureItem(_SiteModel):
    title: str = ""
    description: str = ""


class HomePage(_SiteModel):
    hero: HeroConfig = Field(default_factory=HeroConfig)
    stats: Tuple[StatItem, ...] = ()
    features: Tuple[FeatureItem, ...] = ()


class ServiceItem(_SiteModel):
    title: str = ""
    description: str = ""
    features: Tuple[str, ...] = ()


class ServicesPage(_SiteModel):
    title: str = ""
    subtitle: str = ""
    intro: str = ""
    services: Tuple[ServiceItem, ...] = ()


class ValueItem(_SiteModel):
    title: str = ""
    description: str = ""


class AboutPage(_SiteModel):
    title: str = ""
    subtitle: str = ""
    content: str = ""
    values: Tuple[ValueItem, ...] = ()


class ContactPage(_SiteModel):
    # Accepted and preserved, but no page renders these records yet.
    contacts: Tuple[Any, ...] = ()


class PagesConfig(_SiteModel):
    """
    Per-page content. ``about`` stays None when the document has no about
    section, which also drops the about teaser from the home page.
    """
    home: HomePage = Field(default_factory=HomePage)
    services: ServicesPage = Field(default_factory=ServicesPage)
    about: Optional[AboutPage] = None
    contact: ContactPage = Field(default_factory=ContactPage)


class SiteConfig(_SiteModel):
    """
    Top-level, validated description of a generated site.

    Attributes:
        company: Company identity and contact details.
        branding: Primary and accent colors.
        pages: Content for the home, services, about and contact pages.
    """
    company: CompanyConfig
    branding: BrandingConfig
    pages: PagesConfig = Field(default_factory=PagesConfig)

    @property
    def slug(self) -> str:
        """Output directory and published project name."""
        return slugify(self.company.name)

    @property
    def hash(self) -> str:
        """
        Deterministic hash of the normalized config, used to detect changes.
        """
        payload = self.model_dump(mode="json", by_alias=True)
        blob = json.dumps(payload, sort_keys=True, separators=(",", ":"), ensure_ascii=False).encode("utf-8")
        return hashlib.sha256(blob).hexdigest()


def validate_config(raw: Any) -> SiteConfig:
    """
    Validate a raw document and resolve every optional field to its default.

    Required fields are checked in a fixed order and the first failure wins:
    company, company.name, branding, branding.primaryColor, the primary color
    format, then the accent color format (when given).

    Args:
        raw: Parsed document (typically the result of ``json.load``).

    Returns:
        A frozen SiteConfig.

    Raises:
        ConfigError: Naming the first missing or malformed field.
    """
    if not isinstance(raw, Mapping):
        raise ConfigError("Configuration root must be an object.")

    _check_required_fields(raw)

    try:
        return SiteConfig.model_validate(dict(raw))
    except ValidationError as exc:
        raise ConfigError(str(exc), field=_first_error_field(exc)) from exc


def load_config(path: Path | str) -> SiteConfig:
    """
    Load and validate a JSON (or TOML) site document.

    Args:
        path: Path to the document. Files ending in ``.toml`` are parsed as
            TOML, everything else as JSON.

    Returns:
        A validated SiteConfig object.

    Raises:
        ConfigError: If the file is missing, unreadable, or invalid.
    """
    config_path = Path(path).expanduser().resolve()
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        if config_path.suffix.lower() == ".toml":
            with config_path.open("rb") as handle:
                raw_data: Dict[str, Any] = tomllib.load(handle)
        else:
            with config_path.open("r", encoding="utf-8") as handle:
                raw_data = json.load(handle)
    except OSError as exc:
        raise ConfigError(f"Unable to read configuration file: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise ConfigError(f"Configuration file is not valid UTF-8: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in configuration file: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in configuration file: {exc}") from exc

    return validate_config(raw_data)


def _check_required_fields(raw: Mapping) -> None:
    company = raw.get("company")
    if not isinstance(company, Mapping):
        raise ConfigError("Missing required field: company", field="company")

    name = company.get("name")
    if not isinstance(name, str) or not name.strip():
        raise ConfigError("Missing required field: company.name", field="company.name")

    branding = raw.get("branding")
    if not isinstance(branding, Mapping):
        raise ConfigError("Missing required field: branding", field="branding")

    primary = branding.get("primaryColor")
    if not primary:
        raise ConfigError("Missing required field: branding.primaryColor", field="branding.primaryColor")
    if not is_hex_color(primary):
        raise ConfigError(
            f"Invalid branding.primaryColor format {primary!r}. Use #RRGGBB",
            field="branding.primaryColor",
        )

    accent = branding.get("accentColor")
    if accent and not is_hex_color(accent):
        raise ConfigError(
            f"Invalid branding.accentColor format {accent!r}. Use #RRGGBB",
            field="branding.accentColor",
        )


def _first_error_field(exc: ValidationError) -> Optional[str]:
    errors = exc.errors()
    if not errors:
        return None
    return ".".join(str(part) for part in errors[0].get("loc", ())) or None
