"""Tests for themes.py — the named ANSI theme registry."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from linetint.themes import RESET, THEMES, Theme, get_theme, theme_names


class TestThemeRender:
    def test_wraps_text_in_sgr_and_reset(self):
        theme = Theme(name="x", codes="1;32")
        assert theme.render(b"ok") == b"\x1b[1;32mok\x1b[0m"

    def test_empty_text_stays_empty(self):
        assert THEMES["success"].render(b"") == b""

    def test_render_is_idempotent_per_call(self):
        theme = THEMES["danger"]
        assert theme.render(b"fail") == theme.render(b"fail")

    def test_sprint_works_on_str(self):
        assert THEMES["error"].sprint("boom") == "\x1b[97;41mboom\x1b[0m"

    def test_theme_is_frozen(self):
        theme = Theme(name="x", codes="31")
        with pytest.raises(ValidationError):
            theme.codes = "32"  # type: ignore[misc]


class TestRegistry:
    def test_known_names(self):
        for name in ("success", "error", "danger", "warning", "info"):
            assert get_theme(name) is THEMES[name]

    def test_unknown_name_returns_none(self):
        assert get_theme("bogus-theme") is None

    def test_theme_names_sorted(self):
        names = theme_names()
        assert names == sorted(names)
        assert "secondary" in names

    def test_every_theme_ends_with_reset(self):
        for theme in THEMES.values():
            assert theme.render(b"x").endswith(RESET)
