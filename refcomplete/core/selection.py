"""Candidate selection: which short ref names match what the user typed."""

from __future__ import annotations

import logging
import string
from collections.abc import Callable, Iterable

from .refs import classify
from .types import Options

# ispunct/isupper in the C locale
_ANCHOR_CHARS = frozenset(string.punctuation + string.ascii_uppercase)


def select_refs(
    options: Options,
    references: Iterable[str],
    predicate: Callable[[str], bool],
    logger: logging.Logger | None = None,
) -> list[str]:
    """Classify every reference and keep the short names accepted by ``predicate``."""
    return [
        name
        for ref_name in references
        for name in classify(options, ref_name, logger)
        if predicate(name)
    ]


def select_by_strict_prefix(
    options: Options,
    references: Iterable[str],
    prefix: str,
    logger: logging.Logger | None = None,
) -> list[str]:
    return select_refs(options, references, lambda name: name.startswith(prefix), logger)


def ref_may_be_encoded_by_partial_prefix(ref: str, prefix: str) -> bool:
    """Return True for pairs like ``"cypok/arm/master"`` and ``"cy/a/m"``.

    Punctuation and uppercase letters in ``prefix`` skip ahead to the next
    occurrence of that same character in ``ref``. Every other character must
    match ``ref`` right at the cursor.
    """
    r = 0
    for p in prefix:
        if p in _ANCHOR_CHARS:
            r = ref.find(p, r)
            if r < 0:
                return False
        elif r >= len(ref) or ref[r] != p:
            return False
        r += 1
    return True


def select_by_partial_prefix(
    options: Options,
    references: Iterable[str],
    prefix: str,
    logger: logging.Logger | None = None,
) -> list[str]:
    return select_refs(
        options,
        references,
        lambda name: ref_may_be_encoded_by_partial_prefix(name, prefix),
        logger,
    )


def select_candidates(
    options: Options,
    references: Callable[[], Iterable[str]],
    prefix: str,
    logger: logging.Logger | None = None,
) -> list[str]:
    """Strict-prefix matches, falling back to partial-prefix matches.

    ``references`` is called once per pass since backend iterators are
    single-use. The result is deduplicated and sorted. Discarded refs are
    reported on ``logger``.
    """
    candidates = select_by_strict_prefix(options, references(), prefix, logger)
    if not candidates:
        candidates = select_by_partial_prefix(options, references(), prefix, logger)
    return sorted(set(candidates))
