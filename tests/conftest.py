"""Shared fixtures for linetint tests."""

import pytest

from linetint.rules.models import Ruleset
from tests.helpers import BRACE, BRACKET, make_rule


@pytest.fixture
def bracket_brace_ruleset() -> Ruleset:
    return Ruleset.of(make_rule("err", BRACKET), make_rule("err", BRACE))


@pytest.fixture(autouse=True)
def _clean_linetint_env(monkeypatch):
    for name in (
        "LINETINT_SUCCESS_THEME",
        "LINETINT_FAILURE_THEME",
        "LINETINT_NO_STDOUT",
        "LINETINT_NO_STDERR",
        "LINETINT_EXIT_STATUS",
    ):
        monkeypatch.delenv(name, raising=False)
