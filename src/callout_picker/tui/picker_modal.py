"""Callout picker — modal overlay with a query input and a suggestion list.

The screen drives a PickerSession: every input change recomputes suggestions,
selecting an option commits the session, escape cancels it. The screen is
dismissed with the chosen CalloutType, or None on cancel.
"""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Input, OptionList, Static
from textual.widgets.option_list import Option

from callout_picker.app.host import Editor
from callout_picker.app.picker_session import PickerPhase, PickerSession
from callout_picker.app.registry import CalloutRegistry
from callout_picker.core.catalog import CalloutType

NO_RESULTS = "No matching callouts"


def render_option(callout: CalloutType) -> Text:
    text = Text(callout.identifier, style="bold")
    if callout.icon:
        text.append("  ")
        text.append(callout.icon, style="dim italic")
    return text


class CalloutPickerScreen(ModalScreen[CalloutType | None]):
    """Filterable list of enabled callouts."""

    DEFAULT_CSS = """
    CalloutPickerScreen {
        align: center middle;
    }
    CalloutPickerScreen > Vertical {
        width: 50;
        max-height: 80%;
        height: auto;
        border: round $primary;
        background: $panel;
        padding: 0 1;
    }
    CalloutPickerScreen Input {
        margin-bottom: 1;
    }
    CalloutPickerScreen OptionList {
        height: auto;
        max-height: 20;
    }
    CalloutPickerScreen #picker-empty {
        color: $text-muted;
        text-style: italic;
        padding: 0 1;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
        Binding("down", "cursor_down", "Next", show=False),
        Binding("up", "cursor_up", "Previous", show=False),
    ]

    def __init__(self, registry: CalloutRegistry, editor: Editor) -> None:
        super().__init__()
        self.session = PickerSession(registry, editor)

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Input(placeholder="Callout type…", id="picker-query")
            yield OptionList(id="picker-options")
            yield Static(NO_RESULTS, id="picker-empty")

    def on_mount(self) -> None:
        self._show(self.session.suggestions)
        self.query_one("#picker-query", Input).focus()

    def _options(self) -> OptionList:
        return self.query_one("#picker-options", OptionList)

    def _show(self, suggestions: list[CalloutType]) -> None:
        options = self._options()
        options.clear_options()
        options.add_options(
            [Option(render_option(c), id=c.identifier) for c in suggestions]
        )
        if suggestions:
            options.highlighted = 0
        # [LAW:dataflow-not-control-flow] Empty result is a display state, not an error.
        options.display = bool(suggestions)
        self.query_one("#picker-empty", Static).display = not suggestions

    def on_input_changed(self, event: Input.Changed) -> None:
        event.stop()
        if self.session.phase is PickerPhase.OPEN:
            self._show(self.session.update_query(event.value))

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        index = self._options().highlighted
        if index is not None and index < len(self.session.suggestions):
            self._commit(self.session.suggestions[index])

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        event.stop()
        self._commit(self.session.suggestions[event.option_index])

    def _commit(self, callout: CalloutType) -> None:
        if self.session.phase is not PickerPhase.OPEN:
            return
        self.session.commit(callout)
        self.dismiss(callout)

    def action_cursor_down(self) -> None:
        self._options().action_cursor_down()

    def action_cursor_up(self) -> None:
        self._options().action_cursor_up()

    def action_cancel(self) -> None:
        self.session.cancel()
        self.dismiss(None)
