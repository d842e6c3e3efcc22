"""Run an external command and colorize its stdout/stderr.

Two modes:
- stream (default): each captured stream is piped line by line through its
  own LineTransducer on a separate thread.
- exit-status: both streams are captured in full and, once the command exits,
  written wrapped in the success or failure theme depending on the exit code.

Streams disabled in the config are inherited and pass through unchanged.
"""

from __future__ import annotations

import logging
import subprocess
import sys
import threading
from typing import IO, BinaryIO

from linetint.config import LinetintConfig
from linetint.models import RunResult, StreamName, StreamReport
from linetint.rules.models import Ruleset, Style, StyleResolver
from linetint.rules.parser import UnknownStyleError
from linetint.themes import get_theme
from linetint.transducer import ShortWriteError, SinkWriteError, TransducerError, transduce

logger = logging.getLogger(__name__)

DRAIN_CHUNK = 65536


class CommandError(Exception):
    """Raised when the command cannot be started."""


def _spawn(argv: list[str], *, capture_stdout: bool, capture_stderr: bool) -> subprocess.Popen[bytes]:
    if not argv:
        raise CommandError("no command given")
    try:
        proc = subprocess.Popen(
            argv,
            stdout=subprocess.PIPE if capture_stdout else None,
            stderr=subprocess.PIPE if capture_stderr else None,
        )
    except OSError as e:
        raise CommandError(f"cannot run {argv[0]}: {e}") from e
    logger.debug(f"Started {argv[0]}: pid={proc.pid}")
    return proc


def _exit_code(returncode: int) -> int:
    # Killed by signal N: report 128+N like a shell would.
    return returncode if returncode >= 0 else 128 - returncode


def _discard(source: IO[bytes]) -> None:
    # Keep the pipe open until EOF so the child exits on its own terms.
    try:
        while source.read(DRAIN_CHUNK):
            pass
    except (OSError, ValueError) as e:
        logger.debug(f"Stopped discarding output: {e}")


def _pump(source: IO[bytes], sink: BinaryIO, ruleset: Ruleset, report: StreamReport) -> None:
    try:
        report.bytes_read = transduce(source, sink, ruleset)
    except SinkWriteError as e:
        report.bytes_read = e.bytes_read
        report.error = str(e)
        logger.warning(f"{report.name} colorizing stopped after {e.bytes_read} bytes: {e}")
        _discard(source)
    except TransducerError as e:
        report.bytes_read = e.bytes_read
        report.error = str(e)
        logger.warning(f"{report.name} read failed after {e.bytes_read} bytes: {e}")
    finally:
        source.close()


def _run_streaming(
    argv: list[str],
    ruleset: Ruleset,
    config: LinetintConfig,
    stdout: BinaryIO,
    stderr: BinaryIO,
) -> RunResult:
    proc = _spawn(argv, capture_stdout=not config.no_stdout, capture_stderr=not config.no_stderr)

    reports: list[StreamReport] = []
    threads: list[threading.Thread] = []
    for name, source, sink in (
        (StreamName.STDOUT, proc.stdout, stdout),
        (StreamName.STDERR, proc.stderr, stderr),
    ):
        if source is None:
            continue
        report = StreamReport(name=name)
        reports.append(report)
        thread = threading.Thread(
            target=_pump,
            args=(source, sink, ruleset, report),
            name=f"linetint-{name}",
            daemon=True,
        )
        thread.start()
        threads.append(thread)

    for thread in threads:
        thread.join()
    returncode = proc.wait()
    logger.debug(f"{argv[0]} exited: status={returncode}")
    return RunResult(exit_code=_exit_code(returncode), streams=reports)


def _write_whole(data: bytes, sink: BinaryIO, style: Style, report: StreamReport) -> None:
    report.bytes_read = len(data)
    rendered = style.render(data)
    try:
        written = sink.write(rendered)
        if written is not None and written < len(rendered):
            raise ShortWriteError(written, len(rendered))
        sink.flush()
    except (OSError, ValueError) as e:
        report.error = str(e)
        logger.warning(f"{report.name} write failed: {e}")


def _run_exit_status(
    argv: list[str],
    config: LinetintConfig,
    resolve: StyleResolver,
    stdout: BinaryIO,
    stderr: BinaryIO,
) -> RunResult:
    success = _require_style(resolve, config.success_theme)
    failure = _require_style(resolve, config.failure_theme)

    proc = _spawn(argv, capture_stdout=not config.no_stdout, capture_stderr=not config.no_stderr)
    out, err = proc.communicate()
    exit_code = _exit_code(proc.returncode)
    style = success if exit_code == 0 else failure
    logger.debug(f"{argv[0]} exited: status={proc.returncode}")

    reports: list[StreamReport] = []
    for name, data, sink in ((StreamName.STDOUT, out, stdout), (StreamName.STDERR, err, stderr)):
        if data is None:
            continue
        report = StreamReport(name=name)
        _write_whole(data, sink, style, report)
        reports.append(report)
    return RunResult(exit_code=exit_code, streams=reports)


def _require_style(resolve: StyleResolver, name: str) -> Style:
    style = resolve(name)
    if style is None:
        raise UnknownStyleError(name, name)
    return style


def run_command(
    argv: list[str],
    *,
    ruleset: Ruleset,
    config: LinetintConfig | None = None,
    resolve: StyleResolver = get_theme,
    stdout: BinaryIO | None = None,
    stderr: BinaryIO | None = None,
) -> RunResult:
    """Run argv, colorizing its output into stdout/stderr (default: our own).

    Raises:
        CommandError: the command could not be started.
        UnknownStyleError: exit-status mode with an unknown theme name.
    """
    config = config or LinetintConfig()
    stdout = stdout if stdout is not None else sys.stdout.buffer
    stderr = stderr if stderr is not None else sys.stderr.buffer

    if config.exit_status:
        return _run_exit_status(argv, config, resolve, stdout, stderr)
    return _run_streaming(argv, ruleset, config, stdout, stderr)
