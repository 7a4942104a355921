"""Semantic tag formatting — number grouping and path abbreviation."""

from __future__ import annotations

import decimal
import enum
import os
import re

from seaprint.colors import PATH_PREFIX_COLOR
from seaprint.resolver import RGB, parse_hex

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


class SemanticTag(enum.Enum):
    NONE = "none"
    NUMBER = "number"
    PATH = "path"


_SEMANTIC_TAGS: dict[str, SemanticTag] = {
    "number": SemanticTag.NUMBER,
    "filename": SemanticTag.PATH,
    "filepath": SemanticTag.PATH,
}


def classify(tag: str) -> SemanticTag:
    return _SEMANTIC_TAGS.get(tag, SemanticTag.NONE)


def format_text(text: str, tag: str, color: RGB) -> str:
    """Rewrite *text* according to what *tag* means.

    *color* is the tag's resolved color; path abbreviation switches back
    to it after the colored "." or "~" prefix.
    """
    kind = classify(tag)
    if kind is SemanticTag.NUMBER:
        return _format_integer(text)
    if kind is SemanticTag.PATH:
        return _abbreviate_path(text, color)
    return text


def _format_integer(text: str) -> str:
    if not _INTEGER_RE.fullmatch(text):
        return text
    sign = text[0] if text[0] in "+-" else ""
    # Grouped as a digit string; int() refuses very long inputs
    digits = text.lstrip("+-").lstrip("0") or "0"
    if digits == "0" and sign == "-":
        sign = ""
    return sign + to_comma_string(digits)


def _current_dir() -> str:
    try:
        return os.getcwd()
    except OSError:
        return ""


def _abbreviate_path(text: str, color: RGB) -> str:
    prefix_ansi = parse_hex(PATH_PREFIX_COLOR).to_ansi()

    cwd = _current_dir()
    if cwd and text != cwd and text.startswith(cwd):
        return f"{prefix_ansi}.{color.to_ansi()}{text[len(cwd):]}"

    home = os.environ.get("HOME", "")
    if home and text.startswith(home):
        return f"{prefix_ansi}~{color.to_ansi()}{text[len(home):]}"
    return text


# ── General number helpers ───────────────────────────────────────

def to_comma_string(value: object) -> str:
    """Group the integer part of a number with commas (1005.2 → "1,005.2").

    Accepts numbers or numeric strings; the fractional part is kept as is.
    """
    if isinstance(value, float):
        value = decimal.Decimal(repr(value))
    # Positional notation, never an exponent (1e16, 1e-05)
    s = format(value, "f") if isinstance(value, decimal.Decimal) else str(value)
    neg = s.startswith("-")
    if neg:
        s = s[1:]
    int_part, dot, frac = s.partition(".")

    pieces: list[str] = []
    n = len(int_part)
    for i, c in enumerate(int_part):
        if i > 0 and (n - i) % 3 == 0:
            pieces.append(",")
        pieces.append(c)
    res = "".join(pieces) + dot + frac
    return f"-{res}" if neg else res


def to_pretty_byte_size(n: int) -> str:
    """Human readable size with two decimals (1536 → "1.50KB")."""
    size = float(n)
    unit = "B"
    for next_unit in ("KB", "MB", "GB"):
        if size < 1024.0:
            break
        size /= 1024.0
        unit = next_unit
    return f"{size:.2f}{unit}"
