"""Shared test fixtures for the refcomplete test suite."""

from pathlib import Path

import pygit2
import pytest
from prompt_toolkit.application import create_app_session
from prompt_toolkit.input import create_pipe_input
from prompt_toolkit.output import DummyOutput

from refcomplete.core.types import Options
from tests.helpers import REPO_REFS


@pytest.fixture
def options() -> Options:
    return Options()


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """A throwaway repository with branches, a tag, remote refs and a note ref."""
    path = tmp_path / "repo"
    repo = pygit2.init_repository(str(path))
    sig = pygit2.Signature("Test", "test@example.com")
    tree = repo.TreeBuilder().write()
    oid = repo.create_commit(None, sig, sig, "init", tree, [])
    for name in REPO_REFS:
        repo.references.create(name, oid)
    return path


@pytest.fixture
def pipe_input():
    """Run prompt_toolkit applications against a pipe instead of a terminal."""
    with create_pipe_input() as inp:
        with create_app_session(input=inp, output=DummyOutput()):
            yield inp
