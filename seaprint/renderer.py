"""Renderer — "[text](tag)" markup → 24-bit ANSI colored text."""

from __future__ import annotations

import logging
import re
import sys
import threading
from typing import TextIO

from seaprint.parser import parse_text
from seaprint.registry import ColorRegistry, default_registry
from seaprint.resolver import RGB, ColorResolver
from seaprint.semantic import format_text

log = logging.getLogger(__name__)

RESET = "\033[0m"

DEBUG_COLOR = RGB(208, 75, 255)

_ANSI_RE = re.compile(r"\033\[[0-9;]*m")

_HSPACE = " \t"


class Renderer:
    """Render markup against one color registry."""

    def __init__(self, registry: ColorRegistry | None = None, *,
                 trim_whitespace: bool = True) -> None:
        self.registry = registry if registry is not None else default_registry()
        self.resolver = ColorResolver(self.registry)
        self.trim_whitespace = trim_whitespace

    def register_color(self, name: str, value: str) -> None:
        self.registry.add_color(name, value)

    def render(self, base_tag: str, text: str) -> str:
        base = self.resolver.resolve(base_tag)
        if base is None:
            log.debug("Base color %r unresolved, using gray", base_tag)
            base = RGB.gray()
        base_ansi = base.to_ansi()

        # Indentation and trailing blanks stay outside the colored span
        leading = trailing = ""
        if self.trim_whitespace and "\n" not in text:
            body = text.rstrip(_HSPACE)
            trailing = text[len(body):]
            stripped = body.lstrip(_HSPACE)
            leading = body[:len(body) - len(stripped)]
            text = stripped

        out = [leading, base_ansi]
        for frag in parse_text(text):
            if frag.tag is None:
                out.append(frag.text)
                continue
            rgb = self.resolver.resolve(frag.tag)
            if rgb is None:
                out.append(frag.literal())
                continue
            out.append(rgb.to_ansi())
            out.append(format_text(frag.text, frag.tag, rgb))
            out.append(base_ansi)
        out.append(trailing)
        out.append(RESET)
        return "".join(out)

    def render_line(self, base_tag: str, text: str) -> str:
        return self.render(base_tag, text) + "\n"

    def cprint(self, base_tag: str, text: str, file: TextIO | None = None) -> None:
        (file or sys.stdout).write(self.render(base_tag, text))

    def cprintln(self, base_tag: str, text: str, file: TextIO | None = None) -> None:
        (file or sys.stdout).write(self.render_line(base_tag, text))


def strip_ansi(text: str) -> str:
    """Remove all ANSI SGR sequences from text."""
    return _ANSI_RE.sub("", text)


# ── Module-level API bound to the default registry ───────────────

_renderer: Renderer | None = None
_renderer_lock = threading.Lock()


def default_renderer() -> Renderer:
    global _renderer
    if _renderer is None:
        with _renderer_lock:
            if _renderer is None:
                _renderer = Renderer(default_registry())
    return _renderer


def render(base_tag: str, text: str) -> str:
    return default_renderer().render(base_tag, text)


def render_line(base_tag: str, text: str) -> str:
    return default_renderer().render_line(base_tag, text)


def cprint(base_tag: str, text: str, file: TextIO | None = None) -> None:
    default_renderer().cprint(base_tag, text, file)


def cprintln(base_tag: str, text: str, file: TextIO | None = None) -> None:
    """Print rendered markup followed by a newline."""
    default_renderer().cprintln(base_tag, text, file)


def register_color(name: str, value: str) -> None:
    """Add or replace a color alias for the rest of the process."""
    default_registry().add_color(name, value)


def debugln(message: str, file: TextIO | None = None) -> None:
    """Print *message* verbatim in the debug color (no tag parsing)."""
    (file or sys.stdout).write(f"{DEBUG_COLOR.to_ansi()}{message}{RESET}\n")
