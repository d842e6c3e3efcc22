"""Pydantic models describing the outcome of a colorized command run."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field


class StreamName(StrEnum):
    STDOUT = "stdout"
    STDERR = "stderr"


class StreamReport(BaseModel):
    name: StreamName
    bytes_read: int = 0
    error: str | None = None


class RunResult(BaseModel):
    exit_code: int
    streams: list[StreamReport] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.exit_code == 0

    def stream(self, name: StreamName) -> StreamReport | None:
        return next((s for s in self.streams if s.name == name), None)
