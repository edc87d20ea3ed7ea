# refcomplete: git ref name completion for command line editors

from .cmdline import BufferCmdLine, InMemoryCmdLine
from .completer import RefCompleter
from .config import Settings
from .console_app import ConsoleApp
from .core import MatchOutcome, Options, complete, transform_cmdline

__all__ = [
    "BufferCmdLine",
    "ConsoleApp",
    "InMemoryCmdLine",
    "MatchOutcome",
    "Options",
    "RefCompleter",
    "Settings",
    "complete",
    "transform_cmdline",
]
