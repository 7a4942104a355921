"""Command line entry — render markup from arguments to stdout."""

from __future__ import annotations

import argparse
import logging
import os
import sys

from seaprint.config import apply_color_config, configure_from_env
from seaprint.registry import default_registry
from seaprint.renderer import RESET, Renderer

ENV_LOG_LEVEL = "SEAPRINT_LOG_LEVEL"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="seaprint",
        description="Print text with [text](tag) color markup.",
    )
    parser.add_argument("base", nargs="?", default="",
                        help="base color: alias, HTML name or hex")
    parser.add_argument("text", nargs="*", help="markup to render (words are joined by spaces)")
    parser.add_argument("-c", "--color", action="append", default=[], metavar="NAME=VALUE",
                        help="register a color alias (repeatable)")
    parser.add_argument("--config", metavar="PATH", help="YAML file of color aliases")
    parser.add_argument("-n", "--no-newline", action="store_true",
                        help="do not print a trailing newline")
    parser.add_argument("--list-colors", action="store_true",
                        help="show every registered alias in its color")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging to stderr")
    return parser


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG
    if not verbose:
        name = os.environ.get(ENV_LOG_LEVEL, "WARNING").upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ValueError(f"unknown log level {name!r} in ${ENV_LOG_LEVEL}")
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _parse_alias(spec: str) -> tuple[str, str]:
    name, sep, value = spec.partition("=")
    if not sep:
        raise ValueError(f"expected NAME=VALUE, got {spec!r}")
    return name.strip(), value.strip()


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    registry = default_registry()
    try:
        _setup_logging(args.verbose)
        configure_from_env(registry)
        if args.config:
            apply_color_config(args.config, registry)
        for spec in args.color:
            registry.add_color(*_parse_alias(spec))
    except ValueError as e:
        print(f"seaprint: {e}", file=sys.stderr)
        return 2

    renderer = Renderer(registry)
    if args.list_colors:
        for name in registry.names():
            if name:
                # Names are not run through the markup parser
                rgb = renderer.resolver.resolve(name)
                label = f"{rgb.to_ansi()}{name}{RESET}" if rgb else name
                sys.stdout.write(f"{label} = {registry.lookup(name)}\n")
        return 0

    text = " ".join(args.text)
    if args.no_newline:
        renderer.cprint(args.base, text)
    else:
        renderer.cprintln(args.base, text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
