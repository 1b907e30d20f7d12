"""REPL settings, read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_PROMPT = "lispy> "
DEFAULT_LOG_LEVEL = "WARNING"


def _from_env(var: str) -> str | None:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return None
    return raw


@dataclass
class ReplConfig:
    prompt: str = DEFAULT_PROMPT
    history_file: Path | None = None
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> ReplConfig:
        """Build a config from LISPY_PROMPT, LISPY_HISTORY_FILE and LISPY_LOG_LEVEL."""
        history = _from_env("LISPY_HISTORY_FILE")
        return cls(
            prompt=_from_env("LISPY_PROMPT") or DEFAULT_PROMPT,
            history_file=Path(history.strip()).expanduser() if history else None,
            log_level=(_from_env("LISPY_LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper(),
        )
