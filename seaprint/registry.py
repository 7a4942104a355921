"""Color alias registry — mutable name → color-spec table shared by renderers."""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping

from seaprint.colors import DEFAULT_ALIASES, DEFAULT_TEXT_ALIAS

log = logging.getLogger(__name__)

# Seconds a lookup waits for the lock before treating the alias as missing
LOOKUP_TIMEOUT = 1.0


def expand_alias_table(table: Mapping[str, str]) -> dict[str, str]:
    """Split comma-separated keys ("opt,option") into one entry per name.

    The "text" alias is also registered under the empty name, which is the
    color of untagged text.
    """
    out: dict[str, str] = {}
    for key, value in table.items():
        for part in str(key).split(","):
            name = part.strip()
            if name:
                out[name] = str(value)
            if name == DEFAULT_TEXT_ALIAS:
                out[""] = str(value)
    return out


class ColorRegistry:
    """Alias table seeded with the built-in defaults on first use.

    Every operation takes the lock for the single read or write only.
    """

    def __init__(self, defaults: Mapping[str, str] | None = None) -> None:
        self._defaults = DEFAULT_ALIASES if defaults is None else defaults
        self._lock = threading.Lock()
        self._colors: dict[str, str] | None = None

    def ensure_initialized(self) -> dict[str, str]:
        colors = self._colors
        if colors is not None:
            return colors
        with self._lock:
            if self._colors is None:
                self._colors = expand_alias_table(self._defaults)
                log.debug("Seeded color registry with %d aliases", len(self._colors))
            return self._colors

    def add_color(self, name: str, value: str) -> None:
        colors = self.ensure_initialized()
        with self._lock:
            colors[name] = value
        log.debug("Registered color alias %r -> %r", name, value)

    def update(self, mapping: Mapping[str, str]) -> None:
        """Register several aliases under one lock acquisition."""
        colors = self.ensure_initialized()
        with self._lock:
            colors.update(mapping)
        log.debug("Registered %d color aliases", len(mapping))

    def remove_color(self, name: str) -> bool:
        colors = self.ensure_initialized()
        with self._lock:
            removed = colors.pop(name, None) is not None
        return removed

    def lookup(self, name: str) -> str | None:
        """Return the registered value for *name*, or None.

        A lock that cannot be acquired in time counts as "not found".
        """
        colors = self.ensure_initialized()
        if not self._lock.acquire(timeout=LOOKUP_TIMEOUT):
            log.warning("Color registry busy, skipping alias lookup for %r", name)
            return None
        try:
            return colors.get(name)
        finally:
            self._lock.release()

    def names(self) -> list[str]:
        colors = self.ensure_initialized()
        with self._lock:
            return sorted(colors)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.lookup(name) is not None

    def __len__(self) -> int:
        colors = self.ensure_initialized()
        with self._lock:
            return len(colors)


# ── Process-wide default ─────────────────────────────────────────

_default: ColorRegistry | None = None
_default_lock = threading.Lock()


def default_registry() -> ColorRegistry:
    """Return the shared registry, creating it on first call."""
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = ColorRegistry()
    return _default
