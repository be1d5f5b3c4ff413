"""Pytest configuration and fixtures for tasktree tests."""

from datetime import datetime

import pytest

from tasktree import Task, TaskCollection, TaskStore


@pytest.fixture
def tasks_repo(tmp_path, monkeypatch):
    """Point the tools at an empty repository directory under tmp_path."""
    repo = tmp_path / "repo"
    monkeypatch.setenv("TASKTREE_PATH", str(repo))
    monkeypatch.delenv("TASKTREE_FILE", raising=False)
    return repo


@pytest.fixture
def store(tasks_repo):
    """TaskStore bound to the same repository the tools use."""
    return TaskStore(tasks_repo)


@pytest.fixture
def when():
    return datetime(2025, 3, 1, 9, 0)


@pytest.fixture
def three_tasks():
    """A collection holding tasks A, B and C in that order."""
    collection = TaskCollection.new("/tmp/tasks")
    for title in ("A", "B", "C"):
        collection.push(Task.new(title))
    return collection


@pytest.fixture
def seeded_store(store, when):
    """Store pre-populated with an inbox task, a scheduled task and a tagged task."""
    collection = TaskCollection.new(str(store.repo_path))
    collection.push(Task.new("Buy milk"))
    collection.push(Task.new("Dentist", when=when, notes="Bring the insurance card"))
    collection.push(Task.new("Call mom", tags=["personal", "phone"]))
    store.save(collection)
    return store
