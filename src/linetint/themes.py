"""Named ANSI themes used to style highlighted text."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

ESC = b"\x1b["
RESET = b"\x1b[0m"


class Theme(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    codes: str  # SGR parameters, e.g. "1;32"

    def render(self, text: bytes) -> bytes:
        """Wrap text in this theme's SGR sequence and a reset."""
        if not text:
            return text
        return ESC + self.codes.encode("ascii") + b"m" + text + RESET

    def sprint(self, text: str) -> str:
        return self.render(text.encode()).decode()


def _theme(name: str, codes: str) -> tuple[str, Theme]:
    return name, Theme(name=name, codes=codes)


THEMES: dict[str, Theme] = dict(
    [
        _theme("info", "0;32"),
        _theme("note", "1;96"),
        _theme("light", "97;40"),
        _theme("error", "97;41"),
        _theme("danger", "1;31"),
        _theme("debug", "36"),
        _theme("notice", "1;36"),
        _theme("success", "1;32"),
        _theme("comment", "0;33"),
        _theme("primary", "0;34"),
        _theme("warning", "1;33"),
        _theme("question", "0;35"),
        _theme("secondary", "90"),
    ]
)


def get_theme(name: str) -> Theme | None:
    """Look up a theme by name. Returns None for unknown names."""
    return THEMES.get(name)


def theme_names() -> list[str]:
    return sorted(THEMES)
