from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".linetint.json"
CONFIG_SECTION = "linetint"

_TRUE = ("true", "1", "yes")


def _env_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.lower() in _TRUE


@dataclass
class LinetintConfig:
    success_theme: str = "success"
    failure_theme: str = "error"
    no_stdout: bool = False
    no_stderr: bool = False
    exit_status: bool = False
    rules: list[str] = field(default_factory=list)

    @classmethod
    def from_env(cls) -> LinetintConfig:
        config = cls()
        config._apply_env()
        return config

    @classmethod
    def from_file(cls, path: Path) -> LinetintConfig:
        config = cls()

        if path.exists():
            try:
                data = json.loads(path.read_text())
                section = data.get(CONFIG_SECTION, {})
                if isinstance(section, dict):
                    config._apply_file(section)
            except (json.JSONDecodeError, OSError, AttributeError) as e:
                logger.warning(f"Failed to load linetint config from {path}: {e}")

        config._apply_env()
        return config

    def _apply_file(self, data: dict[str, object]) -> None:
        for key in ("success_theme", "failure_theme"):
            if isinstance(data.get(key), str):
                setattr(self, key, data[key])
        for key in ("no_stdout", "no_stderr", "exit_status"):
            if isinstance(data.get(key), bool):
                setattr(self, key, data[key])
        rules = data.get("rules")
        if isinstance(rules, list) and all(isinstance(r, str) for r in rules):
            self.rules = list(rules)
        elif rules is not None:
            logger.warning("Ignoring 'rules' in config: expected a list of strings")

    def _apply_env(self) -> None:
        if env_val := os.environ.get("LINETINT_SUCCESS_THEME"):
            self.success_theme = env_val
        if env_val := os.environ.get("LINETINT_FAILURE_THEME"):
            self.failure_theme = env_val
        self.no_stdout = _env_bool("LINETINT_NO_STDOUT", self.no_stdout)
        self.no_stderr = _env_bool("LINETINT_NO_STDERR", self.no_stderr)
        self.exit_status = _env_bool("LINETINT_EXIT_STATUS", self.exit_status)


def load_config(path: Path | None = None) -> LinetintConfig:
    """Load config from .linetint.json with env var overrides."""
    if path is None:
        path = Path.cwd() / CONFIG_FILENAME
    return LinetintConfig.from_file(path)
