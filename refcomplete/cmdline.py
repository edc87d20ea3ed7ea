"""Command line buffers the matcher reads from and writes to."""

from __future__ import annotations

from prompt_toolkit.auto_suggest import Suggestion
from prompt_toolkit.buffer import Buffer


class BufferCmdLine:
    """A prompt_toolkit buffer seen as ``user prefix + suggested suffix``.

    The user prefix is the whitespace-delimited word right before the cursor,
    so ``git checkout ma|`` completes ``ma``. The suggested suffix is the
    buffer's auto-suggestion: shown greyed out after the cursor and accepted
    with the right arrow. prompt_toolkit only shows a suggestion while the
    cursor is at the end of the buffer, so anywhere else the suffix is empty.
    """

    def __init__(self, buffer: Buffer) -> None:
        self._buffer = buffer

    def get_user_prefix(self) -> str:
        return self._buffer.document.get_word_before_cursor(WORD=True)

    def replace_user_prefix(self, text: str) -> None:
        old = self.get_user_prefix()
        if old:
            self._buffer.delete_before_cursor(len(old))
        self._buffer.insert_text(text)

    def get_suggested_suffix(self) -> str:
        if not self._buffer.document.is_cursor_at_the_end:
            return ""
        suggestion = self._buffer.suggestion
        return suggestion.text if suggestion else ""

    def replace_suggested_suffix(self, text: str) -> None:
        at_end = self._buffer.document.is_cursor_at_the_end
        self._buffer.suggestion = Suggestion(text) if text and at_end else None


class InMemoryCmdLine:
    """Command line held in two plain strings."""

    def __init__(self, prefix: str = "", suffix: str = "") -> None:
        self.prefix = prefix
        self.suffix = suffix

    def __repr__(self) -> str:
        return f"InMemoryCmdLine(prefix={self.prefix!r}, suffix={self.suffix!r})"

    @property
    def text(self) -> str:
        return self.prefix + self.suffix

    def get_user_prefix(self) -> str:
        return self.prefix

    def replace_user_prefix(self, text: str) -> None:
        self.prefix = text

    def get_suggested_suffix(self) -> str:
        return self.suffix

    def replace_suggested_suffix(self, text: str) -> None:
        self.suffix = text
