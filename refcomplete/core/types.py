"""Data types shared by the matching engine."""

from dataclasses import dataclass, replace
from enum import Enum


@dataclass(frozen=True)
class Options:
    """Per-session matching options."""

    strip_remote_name: bool = True
    suggest_next_suffix: bool = True  # cycle forward
    show_dialog: bool = False

    def reversed(self) -> "Options":
        """Same options, cycling in the opposite direction."""
        return replace(self, suggest_next_suffix=not self.suggest_next_suffix)

    def with_dialog(self) -> "Options":
        return replace(self, show_dialog=True)


class MatchOutcome(str, Enum):
    """Which branch a completion invocation took."""

    NO_MATCH = "no_match"
    PREFIX_COMMITTED = "prefix_committed"
    SUFFIX_SUGGESTED = "suffix_suggested"
    DIALOG_SELECTED = "dialog_selected"
    DIALOG_CANCELLED = "dialog_cancelled"
