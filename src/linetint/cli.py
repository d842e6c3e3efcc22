"""CLI entry point for linetint."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import cast

from linetint import __version__
from linetint.config import LinetintConfig, load_config
from linetint.rules import RuleSpecError, Ruleset, default_ruleset, parse_ruleset
from linetint.runner import CommandError, run_command
from linetint.themes import THEMES, get_theme


def _print_theme_list() -> None:
    for name, theme in THEMES.items():
        print(theme.sprint(name))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="linetint",
        description="Run a command and highlight success/failure words in its output",
        usage="%(prog)s [<flags>] <cmd> [<cmdarg> ...]",
    )
    _ = parser.add_argument(
        "-V", "--version", action="version", version=f"linetint {__version__}"
    )
    _ = parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug output to stderr"
    )
    _ = parser.add_argument(
        "--no-stdout",
        action="store_true",
        dest="no_stdout",
        default=None,
        help="Pass stdout through unchanged",
    )
    _ = parser.add_argument(
        "--no-stderr",
        action="store_true",
        dest="no_stderr",
        default=None,
        help="Pass stderr through unchanged",
    )
    _ = parser.add_argument(
        "--list-themes",
        action="store_true",
        dest="list_themes",
        help="Display the list of available themes",
    )
    _ = parser.add_argument(
        "--success-theme",
        dest="success_theme",
        default=None,
        help="Theme for success words, or for all output on success with --exit-status "
        "(default: success)",
    )
    _ = parser.add_argument(
        "--failure-theme",
        dest="failure_theme",
        default=None,
        help="Theme for failure words, or for all output on failure with --exit-status "
        "(default: error)",
    )
    _ = parser.add_argument(
        "--rule",
        action="append",
        dest="rules",
        default=[],
        metavar="THEME:REGEX",
        help="Highlight REGEX matches with THEME (repeatable, replaces the default rules)",
    )
    _ = parser.add_argument(
        "--exit-status",
        action="store_true",
        dest="exit_status",
        default=None,
        help="Buffer output and color all of it by the command's exit status",
    )
    _ = parser.add_argument(
        "--config", type=Path, default=None, help="Path to config file (default: ./.linetint.json)"
    )
    _ = parser.add_argument("command", nargs=argparse.REMAINDER, help="Command to run")
    return parser


def _merge_args(config: LinetintConfig, args: argparse.Namespace) -> LinetintConfig:
    for key in ("success_theme", "failure_theme", "no_stdout", "no_stderr", "exit_status"):
        value = getattr(args, key)
        if value is not None:
            setattr(config, key, value)
    rules = cast(list[str], args.rules)
    if rules:
        config.rules = rules
    return config


def _build_ruleset(config: LinetintConfig) -> Ruleset:
    # Exit-status mode colors whole streams and never consults the rules.
    if config.exit_status:
        return Ruleset()
    if config.rules:
        return parse_ruleset(config.rules, get_theme)
    return default_ruleset(
        get_theme, failure_style=config.failure_theme, success_style=config.success_theme
    )


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    if args.list_themes:
        _print_theme_list()
        sys.exit(0)

    command = cast(list[str], args.command)
    if command and command[0] == "--":
        command = command[1:]
    if not command:
        parser.print_usage(sys.stderr)
        sys.exit(1)

    config = _merge_args(load_config(cast(Path | None, args.config)), args)

    try:
        ruleset = _build_ruleset(config)
        result = run_command(command, ruleset=ruleset, config=config)
    except RuleSpecError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except CommandError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    sys.exit(result.exit_code)
