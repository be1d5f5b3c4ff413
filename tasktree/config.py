"""Settings loaded from environment variables.

Variables use the ``TASKTREE_`` prefix:

- ``TASKTREE_PATH``: directory holding the tasks repository (default ``~/.tasktree``)
- ``TASKTREE_FILE``: tasks file name inside that directory (default ``tasks.json``)
- ``TASKTREE_LOG_LEVEL``: logging level name (default ``INFO``)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = "TASKTREE"

DEFAULT_PATH = Path("~/.tasktree")
DEFAULT_FILE = "tasks.json"
DEFAULT_LOG_LEVEL = "INFO"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str) -> str:
    v = os.getenv(name)
    if v is None or v.strip() == "":
        return default
    return v.strip()


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default.expanduser()
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    repo_path: Path
    tasks_file: str
    log_level: str

    @property
    def tasks_path(self) -> Path:
        return self.repo_path / self.tasks_file


def load_settings() -> Settings:
    """Read settings from the current environment."""
    return Settings(
        repo_path=_env_path(_k("PATH"), DEFAULT_PATH),
        tasks_file=_env(_k("FILE"), DEFAULT_FILE),
        log_level=_env(_k("LOG_LEVEL"), DEFAULT_LOG_LEVEL).upper(),
    )
