"""Callout settings panel — docked side panel of per-callout visibility toggles.

// [LAW:one-source-of-truth] One toggle per catalog entry, generated from the registry.
// [LAW:locality-or-seam] The panel only posts Toggled; the app owns the mutation.
"""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.message import Message
from textual.widgets import Static

from callout_picker.app.registry import CalloutRegistry
from callout_picker.tui.chip import ToggleChip

TITLE = "Select which callouts are shown."


def toggle_id(identifier: str) -> str:
    return "callout-toggle-{}".format(identifier)


class CalloutSettingsPanel(VerticalScroll):
    """Side panel listing every callout with an ON/OFF chip."""

    DEFAULT_CSS = """
    CalloutSettingsPanel {
        dock: right;
        width: 35%;
        min-width: 30;
        max-width: 50;
        border-left: solid $primary-muted;
        padding: 0 1;
        height: 1fr;
        background: $panel;
        color: $text;
    }
    CalloutSettingsPanel .panel-title {
        text-style: bold;
        margin-bottom: 1;
        color: $text-primary;
    }
    CalloutSettingsPanel ToggleChip {
        margin-bottom: 1;
    }
    CalloutSettingsPanel .panel-footer {
        margin-top: 1;
        color: $text-muted;
        background: $panel-darken-1;
        padding: 0 1;
    }
    """

    class Toggled(Message):
        """Posted when the user flips one callout's visibility."""

        def __init__(self, identifier: str, enabled: bool) -> None:
            self.identifier = identifier
            self.enabled = enabled
            super().__init__()

    class Closed(Message):
        """Posted when the user dismisses the panel."""

    def __init__(self, registry: CalloutRegistry, **kwargs) -> None:
        super().__init__(**kwargs)
        self._registry = registry

    def compose(self) -> ComposeResult:
        yield Static(TITLE, classes="panel-title")
        for callout in self._registry.catalog:
            yield ToggleChip(
                callout.identifier,
                value=self._registry.is_enabled(callout.identifier),
                id=toggle_id(callout.identifier),
                name=callout.identifier,
            )
        yield Static("[bold]Space[/] toggle  [bold]Esc[/] close", classes="panel-footer")

    def on_mount(self) -> None:
        chips = self.query(ToggleChip)
        if chips:
            chips.first().focus()

    def on_toggle_chip_changed(self, event: ToggleChip.Changed) -> None:
        event.stop()
        self.post_message(self.Toggled(event.chip.name, event.value))

    def on_key(self, event) -> None:
        if event.key == "escape":
            event.stop()
            event.prevent_default()
            self.post_message(self.Closed())
