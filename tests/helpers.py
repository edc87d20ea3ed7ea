"""Shared test helpers for the refcomplete test suite."""

from collections.abc import Iterator

REPO_REFS = [
    "refs/heads/master",
    "refs/heads/main",
    "refs/heads/feature/login",
    "refs/tags/v1.0",
    "refs/remotes/origin/master",
    "refs/remotes/origin/release/2024",
    "refs/notes/commits",
]


class FakeRefSource:
    """In-memory ref source that counts how many passes were started."""

    def __init__(self, refs: list[str]) -> None:
        self.refs = list(refs)
        self.passes = 0

    def iter_references(self) -> Iterator[str]:
        self.passes += 1
        yield from self.refs


class FakeDialog:
    """Dialog that records what it was shown and returns a canned answer."""

    def __init__(self, answer: str = "") -> None:
        self.answer = answer
        self.calls: list[tuple[list[str], str]] = []

    def show(self, candidates: list[str], current_text: str) -> str:
        self.calls.append((list(candidates), current_text))
        return self.answer
