"""Color resolution — tag string → 24-bit RGB.

Lookup order: registry alias (one level), HTML named color, semantic
color, then a literal hex triplet (#RGB, #RRGGBB, with or without "#").
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from seaprint.colors import HTML_COLORS, SEMANTIC_COLORS
from seaprint.registry import ColorRegistry, default_registry

log = logging.getLogger(__name__)

_ESC = "\033["

_HEX_RE = re.compile(r"#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})")


@dataclass(frozen=True, slots=True)
class RGB:
    r: int
    g: int
    b: int

    @classmethod
    def gray(cls) -> RGB:
        """Neutral fallback for an unresolvable base color."""
        return cls(128, 128, 128)

    def to_ansi(self) -> str:
        return f"{_ESC}38;2;{self.r};{self.g};{self.b}m"


def parse_hex(value: str) -> RGB | None:
    """Parse a hex triplet; 3-digit forms duplicate each digit."""
    m = _HEX_RE.fullmatch(value)
    if not m:
        return None
    digits = m.group(1)
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    return RGB(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


class ColorResolver:
    """Resolve tags against a registry plus the fixed color tables."""

    def __init__(self, registry: ColorRegistry | None = None) -> None:
        self.registry = registry if registry is not None else default_registry()

    def resolve(self, tag: str) -> RGB | None:
        # Registered values are not looked up in the registry again
        spec = self.registry.lookup(tag)
        if spec is None:
            spec = tag

        hex_value = HTML_COLORS.get(spec.lower())
        if hex_value is None:
            hex_value = SEMANTIC_COLORS.get(spec, spec)

        rgb = parse_hex(hex_value)
        if rgb is None:
            log.debug("Unresolved color tag: %r", tag)
        return rgb


def resolve_color(tag: str) -> RGB | None:
    """Resolve *tag* against the default registry."""
    return ColorResolver().resolve(tag)
