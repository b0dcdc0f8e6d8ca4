"""Startup configuration for the playground host."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

from .telemetry import ENV_PREFIX

DEFAULT_PATTERN = r"[A-Z]\w+"
DEFAULT_FLAGS = "g"
DEFAULT_HIGHLIGHT_STYLE = "bold white on green"
SAMPLE_TEXT = (
    "Regular Expressions, abbreviated as Regex or Regexp, are a string of "
    "characters created within the framework of Regex syntax rules. You can "
    "easily manage your data with Regex, which uses commands like finding, "
    "matching, and editing. Regex can be used in programming languages such "
    "as Python, SQL, JavaScript, R, Google Analytics, Google Data Studio, and "
    "throughout the coding process. Learn regex online with examples and "
    "tutorials on RegexLearn now."
)


@dataclass(frozen=True, slots=True)
class PlaygroundConfig:
    """Initial pattern, flags, text and highlight style for a session."""

    pattern: str = DEFAULT_PATTERN
    flags: str = DEFAULT_FLAGS
    text: str = SAMPLE_TEXT
    highlight_style: str = DEFAULT_HIGHLIGHT_STYLE

    @classmethod
    def from_env(cls, *, load_text_file: bool = True) -> "PlaygroundConfig":
        """Read ``REGEX_PLAYGROUND_*`` overrides; may raise ``OSError``."""

        config = cls()
        pattern = os.getenv(f"{ENV_PREFIX}PATTERN")
        if pattern is not None:
            config = replace(config, pattern=pattern)
        flags = os.getenv(f"{ENV_PREFIX}FLAGS")
        if flags is not None:
            config = replace(config, flags=flags)
        style = os.getenv(f"{ENV_PREFIX}HIGHLIGHT_STYLE")
        if style:
            config = replace(config, highlight_style=style)
        text_file = os.getenv(f"{ENV_PREFIX}TEXT_FILE")
        if text_file and load_text_file:
            config = config.with_text_file(Path(text_file))
        return config

    def with_text_file(self, path: Path) -> "PlaygroundConfig":
        """Return a copy whose text is the UTF-8 content of ``path``."""

        return replace(self, text=path.read_text(encoding="utf-8"))

    def override(
        self,
        *,
        pattern: Optional[str] = None,
        flags: Optional[str] = None,
        highlight_style: Optional[str] = None,
    ) -> "PlaygroundConfig":
        updated = self
        if pattern is not None:
            updated = replace(updated, pattern=pattern)
        if flags is not None:
            updated = replace(updated, flags=flags)
        if highlight_style is not None:
            updated = replace(updated, highlight_style=highlight_style)
        return updated


__all__ = [
    "DEFAULT_FLAGS",
    "DEFAULT_HIGHLIGHT_STYLE",
    "DEFAULT_PATTERN",
    "PlaygroundConfig",
    "SAMPLE_TEXT",
]
