"""
Text-related helpers.
"""

from __future__ import annotations

import re

_SLUG_PATTERN = re.compile(r"[^a-z0-9]")


def slugify(value: str) -> str:
    """
    Generate the project slug for a company name.

    Lower-cases the value and replaces every character outside ``[a-z0-9]``
    with a hyphen. Runs are not collapsed, so "Acme  AS" becomes "acme--as".
    """
    return _SLUG_PATTERN.sub("-", (value or "").lower())
