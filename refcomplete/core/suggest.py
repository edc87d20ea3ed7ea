"""Cycling through suggested suffixes."""


def next_suggested_suffix(
    forward: bool,
    current_prefix: str,
    current_suffix: str,
    candidates: list[str],
) -> str:
    """Pick the candidate after (or before) the one currently displayed.

    The displayed text is ``current_prefix + current_suffix``. When it is not
    one of ``candidates`` cycling restarts from the first candidate (forward)
    or the last one (backward). The result has ``current_prefix`` dropped.
    Candidates are taken in the order given.
    """
    size = len(candidates)
    if size == 0:
        raise ValueError("No candidates to cycle through")

    try:
        idx = candidates.index(current_prefix + current_suffix)
    except ValueError:
        idx = 0 if forward else size - 1
    else:
        idx = (idx + (1 if forward else -1)) % size

    return _drop_prefix(candidates[idx], current_prefix)


def _drop_prefix(text: str, prefix: str) -> str:
    if not text.startswith(prefix):
        raise ValueError(f"Candidate {text!r} does not start with {prefix!r}")
    return text[len(prefix):]
