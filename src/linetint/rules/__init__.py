"""Highlighting rules: models, spec parsing, and defaults."""

from linetint.rules.defaults import FAILURE_PATTERN, SUCCESS_PATTERN, default_ruleset
from linetint.rules.models import Rule, Ruleset, Style, StyleResolver, highlight
from linetint.rules.parser import (
    InvalidPatternError,
    MalformedSpecError,
    RuleSpecError,
    UnknownStyleError,
    parse_rule_spec,
    parse_ruleset,
)

__all__ = [
    "FAILURE_PATTERN",
    "SUCCESS_PATTERN",
    "InvalidPatternError",
    "MalformedSpecError",
    "Rule",
    "RuleSpecError",
    "Ruleset",
    "Style",
    "StyleResolver",
    "UnknownStyleError",
    "default_ruleset",
    "highlight",
    "parse_rule_spec",
    "parse_ruleset",
]
