"""Color alias config — YAML files registered into a ColorRegistry."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from seaprint.registry import ColorRegistry, default_registry, expand_alias_table

log = logging.getLogger(__name__)

ENV_COLORS_PATH = "SEAPRINT_COLORS"


class ColorConfigError(ValueError):
    """Alias file missing, unparseable, or of the wrong shape."""


def load_color_config(path: str | Path) -> dict[str, str]:
    """Read alias definitions from a YAML file.

    Expected layout::

        colors:
          accent: "#39C"
          "warn,warning": "#ffea00"
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            # BaseLoader keeps every scalar a string (000077 is not octal 63)
            data: Any = yaml.load(f, Loader=yaml.BaseLoader)
    except OSError as e:
        raise ColorConfigError(f"Cannot read color config {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ColorConfigError(f"Invalid YAML in color config {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ColorConfigError(f"{path}: top level must be a mapping")

    colors = data.get("colors", {}) or {}
    if not isinstance(colors, dict):
        raise ColorConfigError(f"{path}: 'colors' must be a mapping")

    table: dict[str, str] = {}
    for key, value in colors.items():
        if not isinstance(value, str):
            raise ColorConfigError(f"{path}: color {key!r} must be a single value")
        table[key] = value
    return expand_alias_table(table)


def apply_color_config(path: str | Path, registry: ColorRegistry | None = None) -> int:
    """Register every alias in *path*; returns how many were added."""
    registry = registry if registry is not None else default_registry()
    table = load_color_config(path)
    registry.update(table)
    log.info("Loaded %d color aliases from %s", len(table), path)
    return len(table)


def configure_from_env(registry: ColorRegistry | None = None) -> int:
    """Apply the alias file named by $SEAPRINT_COLORS, if set."""
    path = os.environ.get(ENV_COLORS_PATH)
    if not path:
        return 0
    return apply_color_config(path, registry)
