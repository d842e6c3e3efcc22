"""Built-in failure/success highlighting rules."""

from __future__ import annotations

from linetint.rules.models import Rule, Ruleset, StyleResolver
from linetint.rules.parser import UnknownStyleError, compile_pattern
from linetint.themes import get_theme

FAILURE_PATTERN = r"(?i)\b(?:fail|failure|error)\b"
SUCCESS_PATTERN = r"(?i)\b(?:success|pass|ok)\b"

DEFAULT_FAILURE_STYLE = "error"
DEFAULT_SUCCESS_STYLE = "success"


def _resolve(resolve: StyleResolver, name: str, pattern: str) -> Rule:
    style = resolve(name)
    if style is None:
        raise UnknownStyleError(f"{name}:{pattern}", name)
    return Rule(pattern=compile_pattern(pattern), style=style)


def default_ruleset(
    resolve: StyleResolver = get_theme,
    *,
    failure_style: str = DEFAULT_FAILURE_STYLE,
    success_style: str = DEFAULT_SUCCESS_STYLE,
) -> Ruleset:
    """Failure rule first, then success rule."""
    return Ruleset(
        (
            _resolve(resolve, failure_style, FAILURE_PATTERN),
            _resolve(resolve, success_style, SUCCESS_PATTERN),
        )
    )
