"""Ref name completion for an editable command line.

One call to transform_cmdline() handles one key press:

1. read the ref prefix the user typed,
2. select matching refs (strict prefix first, then partial prefix),
3. extend the typed prefix to the candidates' common prefix if possible,
4. otherwise cycle the suggested suffix or ask the user through a dialog.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Protocol

from .refs import RefSource
from .selection import select_candidates
from .suggest import next_suggested_suffix
from .trie import find_common_prefix
from .types import MatchOutcome, Options

_logger = logging.getLogger("refcomplete.matcher")


class CmdLine(Protocol):
    """Command line split into the user's prefix and an engine-owned suffix."""

    def get_user_prefix(self) -> str: ...

    def replace_user_prefix(self, text: str) -> None: ...

    def get_suggested_suffix(self) -> str: ...

    def replace_suggested_suffix(self, text: str) -> None: ...


class RefsDialog(Protocol):
    """Blocking selection dialog. Returns "" when cancelled."""

    def show(self, candidates: list[str], current_text: str) -> str: ...


def transform_cmdline(
    options: Options,
    cmdline: CmdLine,
    references: Callable[[], Iterable[str]],
    dialog: RefsDialog | None = None,
    logger: logging.Logger | None = None,
) -> MatchOutcome:
    """Run one completion step against ``cmdline``.

    ``references`` returns a fresh iterable of full ref names on every call.
    ``dialog`` is required when ``options.show_dialog`` is set.
    """
    log = logger or _logger

    current_prefix = cmdline.get_user_prefix()
    log.debug('User prefix = "%s"', current_prefix)

    candidates = select_candidates(options, references, current_prefix, log)
    if not candidates:
        log.info("No suitable refs")
        return MatchOutcome.NO_MATCH

    for name in candidates:
        log.debug("Suitable ref: %s", name)

    new_prefix = find_common_prefix(candidates)
    log.debug("Common prefix: %s", new_prefix)

    if new_prefix != current_prefix:
        cmdline.replace_suggested_suffix("")
        cmdline.replace_user_prefix(new_prefix)
        return MatchOutcome.PREFIX_COMMITTED

    current_suffix = cmdline.get_suggested_suffix()
    log.debug('Current suffix = "%s"', current_suffix)

    if options.show_dialog:
        if dialog is None:
            raise ValueError("Dialog mode requires a dialog")
        # Shown even for a single candidate.
        log.debug("Showing dialog...")
        selected = dialog.show(candidates, current_prefix + current_suffix)
        log.debug('Dialog closed, selected ref = "%s"', selected)
        if not selected:
            return MatchOutcome.DIALOG_CANCELLED
        # A suffix left over from cycling would trail the selected name.
        cmdline.replace_suggested_suffix("")
        cmdline.replace_user_prefix(selected)
        return MatchOutcome.DIALOG_SELECTED

    new_suffix = next_suggested_suffix(
        options.suggest_next_suffix, current_prefix, current_suffix, candidates
    )
    log.debug('Next suffix = "%s"', new_suffix)
    cmdline.replace_suggested_suffix(new_suffix)
    return MatchOutcome.SUFFIX_SUGGESTED


def complete(
    options: Options,
    cmdline: CmdLine,
    source: RefSource,
    dialog: RefsDialog | None = None,
    logger: logging.Logger | None = None,
) -> MatchOutcome:
    """transform_cmdline() over a repository-like ref source."""
    return transform_cmdline(options, cmdline, source.iter_references, dialog, logger)
