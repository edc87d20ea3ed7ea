"""Git reference access and classification.

Two pieces live here:
- classify(options, ref_name) -> short display names for one full ref name
- open_repository(path) -> GitRepository, a lazy source of full ref names
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Protocol

import pygit2

from .types import Options

_logger = logging.getLogger("refcomplete.refs")

HEADS_PREFIX = "refs/heads/"
TAGS_PREFIX = "refs/tags/"
REMOTES_PREFIX = "refs/remotes/"

_LOCAL_PREFIXES = (HEADS_PREFIX, TAGS_PREFIX)


class RefcompleteError(Exception):
    """Base class for recoverable refcomplete errors."""


class RepositoryError(RefcompleteError):
    """The repository could not be opened or read."""


# --- Classification ---


def classify(
    options: Options,
    ref_name: str,
    logger: logging.Logger | None = None,
) -> list[str]:
    """Map a fully-qualified ref name to the short names offered to the user.

    ``refs/heads/x`` and ``refs/tags/x`` give ``["x"]``. ``refs/remotes/r/b``
    gives ``["r/b"]``, plus ``"b"`` when ``options.strip_remote_name`` is set.
    Other namespaces (stash, notes, ...) give nothing and are reported on
    ``logger``, the module logger by default.
    """
    for prefix in _LOCAL_PREFIXES:
        if ref_name.startswith(prefix):
            return [ref_name[len(prefix):]]

    if ref_name.startswith(REMOTES_PREFIX):
        remote_ref = ref_name[len(REMOTES_PREFIX):]
        names = [remote_ref]
        if options.strip_remote_name:
            slash = remote_ref.find("/")
            # git never writes a remote-tracking ref outside a remote namespace
            if slash < 0:
                raise AssertionError(f"Remote ref without remote name: {ref_name}")
            names.append(remote_ref[slash + 1:])
        return names

    (logger or _logger).debug("Ignored ref = %s", ref_name)
    return []


# --- Backend ---


class RefSource(Protocol):
    """Anything that can enumerate full reference names."""

    def iter_references(self) -> Iterator[str]: ...


class GitRepository:
    """Read-only view of a git repository's references backed by pygit2."""

    def __init__(self, repo: pygit2.Repository) -> None:
        self._repo = repo

    def iter_references(self) -> Iterator[str]:
        """Yield every full reference name. Each call starts a new pass."""
        try:
            yield from self._repo.references
        except pygit2.GitError as e:
            raise RepositoryError(f"Failed to list references: {e}") from e


def open_repository(path: str) -> GitRepository:
    """Open the repository containing ``path``, searching parent directories."""
    if not path:
        raise RepositoryError("Bad dir for git: empty path")
    try:
        repo = pygit2.Repository(path)
    except (pygit2.GitError, KeyError) as e:
        raise RepositoryError(f"Not a git repository: {path} ({e})") from e
    _logger.debug("Opened repository at %s", repo.path)
    return GitRepository(repo)
