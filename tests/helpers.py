"""Test doubles shared across the linetint suite."""

import io

from linetint.rules.models import Rule
from linetint.rules.parser import compile_pattern


class WrapStyle:
    """Plain-text style: wraps matches in a fixed prefix and suffix."""

    def __init__(self, prefix: bytes, suffix: bytes) -> None:
        self.prefix = prefix
        self.suffix = suffix

    def render(self, text: bytes) -> bytes:
        return self.prefix + text + self.suffix


BRACKET = WrapStyle(b"[", b"]")
BRACE = WrapStyle(b"{", b"}")

_STYLES = {"bracket": BRACKET, "brace": BRACE}


def resolve_test_style(name: str):
    return _STYLES.get(name)


def make_rule(pattern: str, style=BRACKET) -> Rule:
    return Rule(pattern=compile_pattern(pattern), style=style)


class FailingSink(io.BytesIO):
    """Accepts `fail_after` writes, then raises on every write."""

    def __init__(self, fail_after: int, error: Exception | None = None) -> None:
        super().__init__()
        self.fail_after = fail_after
        self.writes = 0
        self.error = error or BrokenPipeError("sink closed")

    def write(self, data) -> int:
        if self.writes >= self.fail_after:
            raise self.error
        self.writes += 1
        return super().write(data)


class ShortSink(io.BytesIO):
    def write(self, data) -> int:
        super().write(data[:1])
        return 1


class FailingSource:
    """Yields the given lines, then raises instead of signalling end of stream."""

    def __init__(self, lines: list[bytes], error: Exception | None = None) -> None:
        self._lines = list(lines)
        self.error = error or ConnectionResetError("source reset")

    def readline(self, size: int = -1) -> bytes:
        if self._lines:
            return self._lines.pop(0)
        raise self.error


class CountingSink(io.BytesIO):
    flushes = 0

    def flush(self) -> None:
        self.flushes += 1
        super().flush()
