"""Parse "<style-name>:<regex>" rule specifications into a Ruleset."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from linetint.rules.models import Rule, Ruleset, StyleResolver

logger = logging.getLogger(__name__)

SEPARATOR = ":"


class RuleSpecError(ValueError):
    """Raised when a rule specification cannot be turned into a Rule."""

    def __init__(self, spec: str, message: str, *, index: int | None = None) -> None:
        self.spec = spec
        self.index = index
        where = f"rule #{index + 1} " if index is not None else ""
        super().__init__(f"{where}{message}")


class MalformedSpecError(RuleSpecError):
    def __init__(self, spec: str, *, index: int | None = None) -> None:
        super().__init__(
            spec,
            f"spec parameter malformed: '{spec}' (expected '<style>:<regex>')",
            index=index,
        )


class UnknownStyleError(RuleSpecError):
    def __init__(self, spec: str, style_name: str, *, index: int | None = None) -> None:
        self.style_name = style_name
        super().__init__(spec, f"unrecognized theme name '{style_name}'", index=index)


class InvalidPatternError(RuleSpecError):
    def __init__(
        self, spec: str, pattern: str, diagnostic: str, *, index: int | None = None
    ) -> None:
        self.pattern = pattern
        self.diagnostic = diagnostic
        super().__init__(spec, f"invalid pattern '{pattern}': {diagnostic}", index=index)


def compile_pattern(
    pattern: str, *, spec: str | None = None, index: int | None = None
) -> re.Pattern[bytes]:
    """Compile a textual regex into a bytes pattern."""
    try:
        return re.compile(pattern.encode("utf-8"))
    except re.error as e:
        raise InvalidPatternError(spec or pattern, pattern, str(e), index=index) from e


def parse_rule_spec(spec: str, resolve: StyleResolver, *, index: int | None = None) -> Rule:
    """Build a Rule from one spec, splitting on the first ':' only."""
    style_name, sep, pattern = spec.partition(SEPARATOR)
    if not sep:
        raise MalformedSpecError(spec, index=index)

    style = resolve(style_name)
    if style is None:
        raise UnknownStyleError(spec, style_name, index=index)

    return Rule(pattern=compile_pattern(pattern, spec=spec, index=index), style=style)


def parse_ruleset(specs: Iterable[str], resolve: StyleResolver) -> Ruleset:
    """Build a Ruleset from specs in order. The first bad spec aborts the build."""
    rules = [parse_rule_spec(spec, resolve, index=i) for i, spec in enumerate(specs)]
    logger.debug(f"Parsed {len(rules)} rule spec(s)")
    return Ruleset(rules)
