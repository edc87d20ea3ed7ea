from .matcher import CmdLine, RefsDialog, complete, transform_cmdline
from .refs import GitRepository, RefcompleteError, RefSource, RepositoryError, classify, open_repository
from .selection import (
    ref_may_be_encoded_by_partial_prefix,
    select_by_partial_prefix,
    select_by_strict_prefix,
    select_candidates,
)
from .suggest import next_suggested_suffix
from .trie import Trie, find_common_prefix
from .types import MatchOutcome, Options

__all__ = [
    "CmdLine",
    "GitRepository",
    "MatchOutcome",
    "Options",
    "RefSource",
    "RefcompleteError",
    "RefsDialog",
    "RepositoryError",
    "Trie",
    "classify",
    "complete",
    "find_common_prefix",
    "next_suggested_suffix",
    "open_repository",
    "ref_may_be_encoded_by_partial_prefix",
    "select_by_partial_prefix",
    "select_by_strict_prefix",
    "select_candidates",
    "transform_cmdline",
]
