"""Tests for the color registry and tag → RGB resolution."""

import logging
import threading

import pytest

from seaprint.colors import HTML_COLORS
from seaprint.registry import ColorRegistry, default_registry, expand_alias_table
from seaprint.resolver import RGB, ColorResolver, parse_hex, resolve_color


@pytest.fixture
def resolver():
    return ColorResolver(ColorRegistry())


class TestParseHex:
    def test_forms(self):
        white = RGB(255, 255, 255)
        assert parse_hex("#fff") == white
        assert parse_hex("fff") == white
        assert parse_hex("#ffffff") == white
        assert parse_hex("FFFFFF") == white

    def test_short_form_duplicates_digits(self):
        assert parse_hex("#4CF") == RGB(0x44, 0xCC, 0xFF)

    def test_six_digits(self):
        assert parse_hex("#ed552b") == RGB(237, 85, 43)

    def test_invalid(self):
        assert parse_hex("") is None
        assert parse_hex("#ff") is None
        assert parse_hex("#abcd") is None
        assert parse_hex("ggg") is None
        assert parse_hex("##fff") is None
        assert parse_hex("#fffffff") is None


class TestRGB:
    def test_ansi(self):
        assert RGB(1, 2, 3).to_ansi() == "\033[38;2;1;2;3m"

    def test_gray(self):
        assert RGB.gray() == RGB(128, 128, 128)


class TestRegistry:
    def test_seeded_defaults(self):
        reg = ColorRegistry()
        assert reg.lookup("error") == "#f00"
        assert reg.lookup("key") == "#4CF"
        assert reg.lookup("") == "#bbb"
        assert reg.lookup("opt") == reg.lookup("option") == "#78aeff"

    def test_missing(self):
        assert ColorRegistry().lookup("nope") is None

    def test_add_overwrites(self):
        reg = ColorRegistry()
        reg.add_color("error", "blue")
        assert reg.lookup("error") == "blue"

    def test_add_logs_ascii(self, caplog):
        caplog.set_level(logging.DEBUG, logger="seaprint.registry")
        ColorRegistry().add_color("brand", "#39C")
        assert "'brand' -> '#39C'" in caplog.text
        assert caplog.text.isascii()

    def test_remove(self):
        reg = ColorRegistry()
        assert reg.remove_color("h1") is True
        assert reg.remove_color("h1") is False
        assert "h1" not in reg

    def test_ensure_initialized_idempotent(self):
        reg = ColorRegistry()
        first = reg.ensure_initialized()
        reg.add_color("x", "#123")
        assert reg.ensure_initialized() is first
        assert reg.lookup("x") == "#123"

    def test_custom_defaults(self):
        reg = ColorRegistry({"a,b": "red"})
        assert reg.names() == ["a", "b"]

    def test_expand_alias_table(self):
        assert expand_alias_table({"txt, text": "#bbb"}) == {
            "txt": "#bbb", "text": "#bbb", "": "#bbb",
        }

    def test_concurrent_registration(self):
        reg = ColorRegistry()
        names = [f"alias{i}" for i in range(200)]

        def worker(chunk):
            for name in chunk:
                reg.add_color(name, "#abc")

        threads = [threading.Thread(target=worker, args=(names[i::8],)) for i in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert all(reg.lookup(name) == "#abc" for name in names)

    def test_concurrent_first_use(self):
        reg = ColorRegistry()
        seen = []
        threads = [threading.Thread(target=lambda: seen.append(id(reg.ensure_initialized())))
                   for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(set(seen)) == 1

    def test_lock_timeout_reads_as_missing(self, monkeypatch):
        import seaprint.registry as registry_mod
        monkeypatch.setattr(registry_mod, "LOOKUP_TIMEOUT", 0.01)
        reg = ColorRegistry()
        reg.ensure_initialized()
        with reg._lock:
            assert reg.lookup("error") is None

    def test_default_registry_shared(self):
        assert default_registry() is default_registry()


class TestResolve:
    def test_named(self, resolver):
        assert resolver.resolve("red") == RGB(255, 0, 0)
        assert resolver.resolve("rebeccapurple") == RGB(0x66, 0x33, 0x99)

    def test_named_case_insensitive(self, resolver):
        assert resolver.resolve("GoldenRod") == resolver.resolve("goldenrod")

    def test_semantic(self, resolver):
        assert resolver.resolve("number") == parse_hex("#556fed")
        assert resolver.resolve("digits") == parse_hex("#556fed")
        assert resolver.resolve("filepath") == parse_hex("#f7cd43")

    def test_alias_overrides_semantic(self, resolver):
        # "filename" is a built-in alias
        assert resolver.resolve("filename") == parse_hex("#e0c16c")

    def test_hex(self, resolver):
        assert resolver.resolve("#39C") == RGB(0x33, 0x99, 0xCC)
        assert resolver.resolve("555") == RGB(0x55, 0x55, 0x55)

    def test_alias_to_named(self, resolver):
        resolver.registry.add_color("oops", "red")
        assert resolver.resolve("oops") == RGB(255, 0, 0)

    def test_alias_single_level(self, resolver):
        resolver.registry.add_color("first", "second")
        resolver.registry.add_color("second", "red")
        assert resolver.resolve("first") is None

    def test_alias_to_bad_value(self, resolver):
        resolver.registry.add_color("broken", "not-a-color")
        assert resolver.resolve("broken") is None

    def test_empty_tag_is_text_color(self, resolver):
        assert resolver.resolve("") == parse_hex("#bbb")

    def test_unresolved(self, resolver):
        assert resolver.resolve("nosuchcolor") is None
        assert resolver.resolve("#12") is None

    def test_table_complete(self):
        assert len(HTML_COLORS) >= 140
        assert all(parse_hex(v) for v in HTML_COLORS.values())

    def test_resolve_color_default(self):
        assert resolve_color("white") == RGB(255, 255, 255)
