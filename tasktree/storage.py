"""Persistence of a task collection as a JSON file.

The file holds the collection's pydantic JSON dump. Optional fields that are
unset are left out rather than written as null, datetimes are ISO 8601
strings and subtasks nest recursively.
"""

from __future__ import annotations

import contextlib
import json
import logging
import os
import threading
from collections.abc import Iterator
from pathlib import Path

from pydantic import ValidationError

from tasktree.config import DEFAULT_FILE
from tasktree.errors import StorageError
from tasktree.models.collection import TaskCollection

logger = logging.getLogger(__name__)

# One lock for every store in the process: a session covers the whole collection.
_SESSION_LOCK = threading.Lock()


class TaskStore:
    """Load and save the collection stored at ``repo_path / tasks_file``."""

    def __init__(self, repo_path: str | Path, tasks_file: str = DEFAULT_FILE) -> None:
        self.repo_path = Path(repo_path)
        self.tasks_file = tasks_file

    @property
    def tasks_path(self) -> Path:
        return self.repo_path / self.tasks_file

    def load(self) -> TaskCollection:
        """
        Read the collection from disk.

        A missing file yields an empty collection bound to ``repo_path``.

        Raises:
            StorageError: the file cannot be read or does not hold a valid collection
        """
        if not self.tasks_path.exists():
            logger.debug("No tasks file at %s; starting empty", self.tasks_path)
            return TaskCollection.new(str(self.repo_path))

        try:
            raw = self.tasks_path.read_bytes()
        except OSError as e:
            raise StorageError(f"couldn't read {self.tasks_path}: {e}") from e

        # Bad UTF-8 surfaces here as UnicodeDecodeError, a ValueError.
        try:
            data = json.loads(raw)
        except ValueError as e:
            logger.warning("Unparseable tasks file %s: %s", self.tasks_path, e)
            raise StorageError(f"invalid tasks file {self.tasks_path}") from e

        # The file may have been moved or hand-edited; the collection belongs where it was found.
        if isinstance(data, dict):
            data["path"] = str(self.repo_path)

        try:
            collection = TaskCollection.model_validate(data)
        except ValidationError as e:
            logger.warning("Invalid tasks file %s: %s", self.tasks_path, e)
            raise StorageError(f"invalid tasks file {self.tasks_path}") from e

        logger.debug("Loaded %s task(s) from %s", len(collection), self.tasks_path)
        return collection

    def save(self, collection: TaskCollection) -> None:
        """
        Write the collection to disk, creating the repository directory if needed.

        Raises:
            StorageError: the file cannot be written
        """
        data = collection.model_dump_json(indent=2, exclude_none=True)
        tmp_path = self.tasks_path.with_suffix(".tmp")
        try:
            self.repo_path.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(data + "\n", encoding="utf-8")
            os.replace(tmp_path, self.tasks_path)
        except OSError as e:
            tmp_path.unlink(missing_ok=True)
            raise StorageError(f"couldn't write {self.tasks_path}: {e}") from e
        logger.debug("Saved %s task(s) to %s", len(collection), self.tasks_path)

    @contextlib.contextmanager
    def session(self) -> Iterator[TaskCollection]:
        """
        Load, hand out and save the collection under the process-wide lock.

        If the body raises, nothing is saved.
        """
        with _SESSION_LOCK:
            collection = self.load()
            yield collection
            self.save(collection)
