"""
Helpers that turn Python values into JavaScript/TSX source literals.
"""

from __future__ import annotations

import json
from typing import Any


def js_string(value: Any) -> str:
    """Quote value as a JavaScript string literal (JSON syntax, UTF-8 kept as is)."""
    return json.dumps("" if value is None else str(value), ensure_ascii=False)


def js_value(value: Any, indent: int = 0) -> str:
    """
    Serialize a list/dict as a pretty-printed JavaScript literal.

    Continuation lines are shifted right by ``indent`` spaces so the literal
    lines up with the JSX attribute it is embedded in.
    """
    text = json.dumps(value, indent=2, ensure_ascii=False)
    if not indent:
        return text
    pad = " " * indent
    first, *rest = text.split("\n")
    return "\n".join([first, *(pad + line for line in rest)])


def template_literal(value: str) -> str:
    """
    Wrap free text in a JavaScript template literal.

    Backslashes, backticks and ``${`` are escaped so the text can neither end
    the literal early nor start an interpolation.
    """
    escaped = (value or "").replace("\\", "\\\\").replace("`", "\\`").replace("${", "\\${")
    return f"`{escaped}`"
