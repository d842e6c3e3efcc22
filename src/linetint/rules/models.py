"""Rule and Ruleset value types and the per-rule highlight pass."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class Style(Protocol):
    def render(self, text: bytes) -> bytes: ...


StyleResolver = Callable[[str], "Style | None"]


def highlight(line: bytes, pattern: re.Pattern[bytes], style: Style) -> bytes:
    """Replace every non-overlapping match of pattern with its rendered form.

    Text between matches is copied verbatim. A line with no matches is
    returned as the same object.
    """
    pieces: list[bytes] = []
    latest = 0
    for match in pattern.finditer(line):
        start, end = match.span()
        pieces.append(line[latest:start])
        pieces.append(style.render(line[start:end]))
        latest = end
    if not pieces:
        return line
    pieces.append(line[latest:])
    return b"".join(pieces)


@dataclass(frozen=True)
class Rule:
    pattern: re.Pattern[bytes]
    style: Style

    def __post_init__(self) -> None:
        if self.pattern is None or self.style is None:
            raise ValueError("rule requires both a pattern and a style")
        if not isinstance(self.pattern, re.Pattern) or not isinstance(self.pattern.pattern, bytes):
            raise ValueError(f"rule pattern must be a compiled bytes regex, got {self.pattern!r}")
        if not callable(getattr(self.style, "render", None)):
            raise ValueError(f"rule style must provide render(), got {self.style!r}")

    def apply(self, line: bytes) -> bytes:
        return highlight(line, self.pattern, self.style)


@dataclass(frozen=True)
class Ruleset:
    """Ordered, immutable rules. Each rule scans the previous rule's output."""

    rules: tuple[Rule, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "rules", tuple(self.rules))

    @classmethod
    def of(cls, *rules: Rule) -> Ruleset:
        return cls(rules)

    def apply_all(self, line: bytes) -> bytes:
        for rule in self.rules:
            line = rule.apply(line)
        return line

    def __iter__(self) -> Iterator[Rule]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)
