"""Tests for rules/defaults.py — built-in failure/success rules."""

from __future__ import annotations

import pytest

from linetint.rules.defaults import FAILURE_PATTERN, SUCCESS_PATTERN, default_ruleset
from linetint.rules.parser import UnknownStyleError
from linetint.themes import THEMES
from tests.helpers import BRACE, BRACKET, resolve_test_style

ERROR = THEMES["error"]
SUCCESS = THEMES["success"]


class TestDefaultRuleset:
    def test_failure_rule_comes_first(self):
        ruleset = default_ruleset()
        assert [r.pattern.pattern.decode() for r in ruleset] == [FAILURE_PATTERN, SUCCESS_PATTERN]
        assert [r.style for r in ruleset] == [ERROR, SUCCESS]

    def test_fail_line(self):
        out = default_ruleset().apply_all(b"Test: FAIL\n")
        assert out == b"Test: " + ERROR.render(b"FAIL") + b"\n"

    def test_ok_line(self):
        out = default_ruleset().apply_all(b"Test: ok\n")
        assert out == b"Test: " + SUCCESS.render(b"ok") + b"\n"

    def test_nothing_notable_unchanged(self):
        line = b"nothing notable\n"
        assert default_ruleset().apply_all(line) is line

    @pytest.mark.parametrize("word", [b"fail", b"Failure", b"ERROR"])
    def test_failure_words(self, word: bytes):
        assert default_ruleset().apply_all(word) == ERROR.render(word)

    @pytest.mark.parametrize("word", [b"success", b"PASS", b"Ok"])
    def test_success_words(self, word: bytes):
        assert default_ruleset().apply_all(word) == SUCCESS.render(word)

    @pytest.mark.parametrize("line", [b"failed", b"errors", b"passed", b"okay", b"token"])
    def test_whole_words_only(self, line: bytes):
        assert default_ruleset().apply_all(line) is line

    def test_mixed_line(self):
        out = default_ruleset().apply_all(b"3 pass, 1 fail\n")
        assert out == b"3 " + SUCCESS.render(b"pass") + b", 1 " + ERROR.render(b"fail") + b"\n"

    def test_custom_styles(self):
        ruleset = default_ruleset(resolve_test_style, failure_style="brace", success_style="bracket")
        assert [r.style for r in ruleset] == [BRACE, BRACKET]
        assert ruleset.apply_all(b"error then ok") == b"{error} then [ok]"

    def test_unknown_style_raises(self):
        with pytest.raises(UnknownStyleError) as exc_info:
            default_ruleset(failure_style="bogus-theme")
        assert exc_info.value.style_name == "bogus-theme"
