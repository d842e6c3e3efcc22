"""Line transducer: drain a byte source into a sink through a Ruleset.

The transducer has no incremental write method. The only supported operation
is read_from(), which copies one source to completion, one line at a time.
"""

from __future__ import annotations

import logging
from typing import BinaryIO, Protocol

from linetint.rules.models import Ruleset

logger = logging.getLogger(__name__)

NEWLINE = b"\n"


class LineSource(Protocol):
    def readline(self, size: int = -1, /) -> bytes: ...


class TransducerError(Exception):
    """A read or write failed. bytes_read counts what was pulled from the source."""

    def __init__(self, error: BaseException, bytes_read: int) -> None:
        super().__init__(str(error))
        self.error = error
        self.bytes_read = bytes_read


class SourceReadError(TransducerError):
    """The source failed for a reason other than end of stream."""


class SinkWriteError(TransducerError):
    """The sink rejected a write. Output already written stays written."""


class ShortWriteError(OSError):
    def __init__(self, written: int, expected: int) -> None:
        super().__init__(f"short write: {written} of {expected} bytes")
        self.written = written
        self.expected = expected


class LineTransducer:
    def __init__(self, sink: BinaryIO, ruleset: Ruleset, *, flush: bool = True) -> None:
        self._sink = sink
        self._ruleset = ruleset
        self._flush = flush

    @property
    def ruleset(self) -> Ruleset:
        return self._ruleset

    def read_from(self, source: LineSource) -> int:
        """Copy source to the sink until end of stream. Returns bytes read.

        Raises:
            SourceReadError: the source raised while reading a line.
            SinkWriteError: the sink raised or accepted fewer bytes than given.
        """
        total = 0
        lines = 0
        while True:
            try:
                line = source.readline()
            except (OSError, ValueError) as e:
                logger.debug(f"Source read failed after {total} bytes: {e}")
                raise SourceReadError(e, total) from e

            total += len(line)
            if not line:
                logger.debug(f"Transduced {lines} line(s), {total} bytes")
                return total

            self._write(self._ruleset.apply_all(line), total)
            lines += 1

    def _write(self, data: bytes, total: int) -> None:
        try:
            written = self._sink.write(data)
            if written is not None and written < len(data):
                raise ShortWriteError(written, len(data))
            if self._flush:
                self._sink.flush()
        except (OSError, ValueError) as e:
            logger.debug(f"Sink write failed after {total} bytes read: {e}")
            raise SinkWriteError(e, total) from e


def transduce(source: LineSource, sink: BinaryIO, ruleset: Ruleset, *, flush: bool = True) -> int:
    """Drain source into sink through ruleset. Returns the number of bytes read."""
    return LineTransducer(sink, ruleset, flush=flush).read_from(source)
