"""seaprint — "[text](tag)" markup for 24-bit colored console output."""

from seaprint.parser import Fragment, parse_text, strip_tags
from seaprint.registry import ColorRegistry, default_registry
from seaprint.renderer import (
    Renderer,
    cprint,
    cprintln,
    debugln,
    register_color,
    render,
    render_line,
    strip_ansi,
)
from seaprint.resolver import RGB, ColorResolver, resolve_color
from seaprint.semantic import SemanticTag, to_comma_string, to_pretty_byte_size

__all__ = [
    "RGB",
    "ColorRegistry",
    "ColorResolver",
    "Fragment",
    "Renderer",
    "SemanticTag",
    "cprint",
    "cprintln",
    "debugln",
    "default_registry",
    "parse_text",
    "register_color",
    "render",
    "render_line",
    "resolve_color",
    "strip_ansi",
    "strip_tags",
    "to_comma_string",
    "to_pretty_byte_size",
]
