"""Tests for the command line buffer adaptors."""

from prompt_toolkit.auto_suggest import Suggestion
from prompt_toolkit.buffer import Buffer

from refcomplete.cmdline import BufferCmdLine, InMemoryCmdLine
from refcomplete.core.matcher import complete
from refcomplete.core.types import MatchOutcome, Options
from tests.helpers import FakeDialog, FakeRefSource


def _buffer(text: str) -> Buffer:
    buffer = Buffer()
    buffer.insert_text(text)
    return buffer


class TestBufferCmdLinePrefix:
    def test_last_word(self) -> None:
        assert BufferCmdLine(_buffer("git checkout feat")).get_user_prefix() == "feat"

    def test_word_with_punctuation(self) -> None:
        assert BufferCmdLine(_buffer("git log origin/ma")).get_user_prefix() == "origin/ma"

    def test_after_space(self) -> None:
        assert BufferCmdLine(_buffer("git checkout ")).get_user_prefix() == ""

    def test_empty(self) -> None:
        assert BufferCmdLine(Buffer()).get_user_prefix() == ""

    def test_replace_keeps_rest_of_line(self) -> None:
        buffer = _buffer("git checkout m")
        BufferCmdLine(buffer).replace_user_prefix("ma")
        assert buffer.text == "git checkout ma"
        assert buffer.cursor_position == len(buffer.text)

    def test_replace_after_space_appends(self) -> None:
        buffer = _buffer("git checkout ")
        BufferCmdLine(buffer).replace_user_prefix("main")
        assert buffer.text == "git checkout main"


class TestBufferCmdLineSuffix:
    def test_no_suggestion(self) -> None:
        assert BufferCmdLine(_buffer("ma")).get_suggested_suffix() == ""

    def test_set_and_read(self) -> None:
        buffer = _buffer("ma")
        cmdline = BufferCmdLine(buffer)
        cmdline.replace_suggested_suffix("ster")
        assert isinstance(buffer.suggestion, Suggestion)
        assert buffer.suggestion.text == "ster"
        assert cmdline.get_suggested_suffix() == "ster"
        assert buffer.text == "ma"

    def test_clear(self) -> None:
        buffer = _buffer("ma")
        cmdline = BufferCmdLine(buffer)
        cmdline.replace_suggested_suffix("ster")
        cmdline.replace_suggested_suffix("")
        assert buffer.suggestion is None


class TestBufferCmdLineMatching:
    REFS = ["refs/heads/master", "refs/heads/main", "refs/heads/develop"]

    def test_commit_then_cycle(self) -> None:
        buffer = _buffer("git checkout m")
        source = FakeRefSource(self.REFS)
        cmdline = BufferCmdLine(buffer)

        assert complete(Options(), cmdline, source) is MatchOutcome.PREFIX_COMMITTED
        assert buffer.text == "git checkout ma"
        assert buffer.suggestion is None

        assert complete(Options(), cmdline, source) is MatchOutcome.SUFFIX_SUGGESTED
        assert buffer.suggestion.text == "in"
        assert complete(Options(), cmdline, source) is MatchOutcome.SUFFIX_SUGGESTED
        assert buffer.suggestion.text == "ster"
        assert buffer.text == "git checkout ma"


class TestBufferCmdLineMidLine:
    REFS = ["refs/heads/master", "refs/heads/main"]

    def _mid_line(self) -> Buffer:
        buffer = _buffer("git checkout ma --force")
        buffer.cursor_position = len("git checkout ma")
        return buffer

    def test_hidden_suggestion_reads_empty(self) -> None:
        buffer = self._mid_line()
        buffer.suggestion = Suggestion("ster")
        assert BufferCmdLine(buffer).get_suggested_suffix() == ""

    def test_cycling_leaves_no_suggestion(self) -> None:
        buffer = self._mid_line()
        cmdline = BufferCmdLine(buffer)
        source = FakeRefSource(self.REFS)

        for _ in range(3):
            assert complete(Options(), cmdline, source) is MatchOutcome.SUFFIX_SUGGESTED
            assert buffer.suggestion is None
        assert buffer.text == "git checkout ma --force"

    def test_dialog_gets_visible_text_only(self) -> None:
        buffer = self._mid_line()
        buffer.suggestion = Suggestion("ster")
        dialog = FakeDialog("master")

        outcome = complete(Options(show_dialog=True), BufferCmdLine(buffer), FakeRefSource(self.REFS), dialog)

        assert outcome is MatchOutcome.DIALOG_SELECTED
        assert dialog.calls == [(["main", "master"], "ma")]
        assert buffer.text == "git checkout master --force"
        assert buffer.cursor_position == len("git checkout master")


class TestInMemoryCmdLine:
    def test_text(self) -> None:
        cmdline = InMemoryCmdLine("ma", "in")
        assert cmdline.text == "main"

    def test_replace(self) -> None:
        cmdline = InMemoryCmdLine()
        cmdline.replace_user_prefix("ma")
        cmdline.replace_suggested_suffix("ster")
        assert (cmdline.get_user_prefix(), cmdline.get_suggested_suffix()) == ("ma", "ster")

    def test_repr(self) -> None:
        assert repr(InMemoryCmdLine("a", "b")) == "InMemoryCmdLine(prefix='a', suffix='b')"
