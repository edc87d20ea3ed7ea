"""Ref selection dialog built on prompt_toolkit's radio list dialog."""

from __future__ import annotations

from prompt_toolkit.shortcuts import radiolist_dialog
from prompt_toolkit.styles import Style

DIALOG_STYLE = Style.from_dict({
    "dialog": "bg:default",
    "dialog frame.label": "bg:#5fafff fg:#202020 bold",
    "dialog.body": "bg:default fg:#bbbbbb",
    "radio-selected": "fg:#5fafff bold",
})


class RadioListRefsDialog:
    """Blocking ref picker. Returns the chosen ref, or "" when cancelled."""

    def __init__(self, title: str = "Git refs", style: Style | None = None) -> None:
        self.title = title
        self.style = style or DIALOG_STYLE

    def show(self, candidates: list[str], current_text: str) -> str:
        app = radiolist_dialog(
            title=self.title,
            text=f"Refs matching '{current_text}':",
            values=[(name, name) for name in candidates],
            default=current_text if current_text in candidates else None,
            style=self.style,
        )
        # Runs in its own thread so it can be opened from inside a running prompt.
        selected = app.run(in_thread=True)
        return selected or ""
