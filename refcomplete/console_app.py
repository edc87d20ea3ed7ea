"""Interactive prompt with git ref completion using prompt_toolkit."""

import logging

from prompt_toolkit import PromptSession
from prompt_toolkit.buffer import Buffer
from prompt_toolkit.formatted_text import HTML
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.key_binding.key_processor import KeyPressEvent
from prompt_toolkit.styles import Style
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from .cmdline import BufferCmdLine
from .completer import RefCompleter
from .config import Settings
from .core.matcher import RefsDialog, complete
from .core.refs import GitRepository, RepositoryError, open_repository
from .core.types import MatchOutcome, Options
from .dialog import RadioListRefsDialog

logger = logging.getLogger("refcomplete.console")


class ConsoleApp:
    """Reads one command line, completing git refs on Tab."""

    def __init__(self, settings: Settings, dialog: RefsDialog | None = None):
        self._settings = settings
        self.options = settings.to_options()
        # Banner goes to stderr so stdout only carries the submitted line.
        self.console = Console(stderr=True)
        self.dialog = dialog or RadioListRefsDialog()
        self.completer = RefCompleter(self.options, self._open_repository)

        # Completion menu styling: transparent background, light-blue highlight
        self.prompt_style = Style.from_dict({
            "prompt": "ansicyan bold",

            # Completion menu base
            "completion-menu": "bg:default",
            "completion-menu.completion": "bg:default fg:#bbbbbb",
            "completion-menu.completion.current": "bg:#5fafff fg:#202020 bold",

            # Greyed-out suggested suffix
            "auto-suggestion": "fg:#6c6c6c",
        })

        self.prompt_session: PromptSession[str] = PromptSession(
            completer=self.completer,
            style=self.prompt_style,
            key_bindings=self._create_key_bindings(),
            complete_while_typing=False,
            history=None,
        )

    def _open_repository(self) -> GitRepository:
        return open_repository(self._settings.repository)

    def complete_buffer(self, buffer: Buffer, options: Options) -> MatchOutcome | None:
        """Run one completion step on ``buffer``. Returns None if the repo is unusable."""
        try:
            repo = self._open_repository()
            return complete(options, BufferCmdLine(buffer), repo, self.dialog)
        except RepositoryError as e:
            logger.warning("%s", e)
            return None

    def _dispatch(self, event: KeyPressEvent, options: Options) -> None:
        buffer = event.current_buffer
        if options.show_dialog:
            self._complete_with_dialog(event, buffer, options)
        else:
            self.complete_buffer(buffer, options)

    def _complete_with_dialog(self, event: KeyPressEvent, buffer: Buffer, options: Options) -> None:
        """Suspend the prompt while the dialog has the terminal.

        Same steps as prompt_toolkit's ``in_terminal()``, but blocking: keys
        already queued behind this one (typed ahead or pasted) are handled
        only after the selection has been written to the buffer.
        """
        app = event.app
        app.renderer.erase()
        try:
            with app.input.detach():
                with app.input.cooked_mode():
                    self.complete_buffer(buffer, options)
        finally:
            app.renderer.reset()
            app.invalidate()

    def _create_key_bindings(self) -> KeyBindings:
        kb = KeyBindings()

        @kb.add("tab")
        def _complete(event: KeyPressEvent) -> None:
            self._dispatch(event, self.options)

        @kb.add("s-tab")
        def _complete_reversed(event: KeyPressEvent) -> None:
            self._dispatch(event, self.options.reversed())

        @kb.add("f2")
        def _pick_ref(event: KeyPressEvent) -> None:
            self._dispatch(event, self.options.with_dialog())

        @kb.add("c-space")
        def _show_menu(event: KeyPressEvent) -> None:
            event.current_buffer.start_completion(select_first=False)

        return kb

    def _print_banner(self):
        """Print key help."""
        help_text = Text()
        help_text.append("Tab", style="cyan")
        help_text.append(" - Complete ref / next suggestion\n", style="white")
        help_text.append("Shift-Tab", style="cyan")
        help_text.append(" - Previous suggestion\n", style="white")
        help_text.append("F2", style="cyan")
        help_text.append(" - Pick a ref from a list\n", style="white")
        help_text.append("Ctrl-Space", style="cyan")
        help_text.append(" - Show matching refs\n", style="white")
        help_text.append("→", style="cyan")
        help_text.append(" - Accept suggestion", style="white")

        self.console.print(Panel(help_text, title="refcomplete", border_style="blue"))

    def run(self) -> str | None:
        """Prompt once and return the submitted line, or None if aborted."""
        if self._settings.show_banner:
            self._print_banner()

        try:
            return self.prompt_session.prompt(HTML("<prompt>› </prompt>"))
        except (KeyboardInterrupt, EOFError):
            return None
