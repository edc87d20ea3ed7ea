"""Completion menu for git ref names."""

import logging
from collections.abc import Callable, Iterable

from prompt_toolkit.completion import Completer, Completion

from .core.refs import RefSource, RepositoryError
from .core.selection import select_candidates
from .core.types import Options

logger = logging.getLogger("refcomplete.completer")


class RefCompleter(Completer):
    """Offers every ref matching the word before the cursor."""

    def __init__(self, options: Options, source_factory: Callable[[], RefSource]):
        self.options = options
        self.source_factory = source_factory

    def get_completions(self, document, complete_event) -> Iterable[Completion]:
        """Get completions for the current input.

        Rules:
        - Complete the whitespace-delimited word before the cursor.
        - Same matching as Tab: strict prefix first, then partial prefix.
        - The repository is reopened each time so new branches show up.
        """
        word = document.get_word_before_cursor(WORD=True)
        try:
            source = self.source_factory()
            candidates = select_candidates(self.options, source.iter_references, word)
        except RepositoryError as e:
            logger.warning("%s", e)
            return

        for name in candidates:
            yield Completion(
                name,
                start_position=-len(word),
                display=name,
            )
