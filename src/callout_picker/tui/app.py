"""Host TUI application using Textual.

// [LAW:locality-or-seam] Thin coordinator — filtering lives in the registry,
//   session state in PickerSession; this module only wires widgets to them.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from textual.app import App, ComposeResult, SystemCommand
from textual.binding import Binding
from textual.containers import Horizontal
from textual.css.query import NoMatches
from textual.widgets import Footer, Static, TextArea

import callout_picker.app.registry
from callout_picker.app.host import PluginDataHost
from callout_picker.core.catalog import CalloutType
from callout_picker.tui.chip import Chip
from callout_picker.tui.editor import TextAreaEditor
from callout_picker.tui.picker_modal import CalloutPickerScreen
from callout_picker.tui.settings_panel import CalloutSettingsPanel

logger = logging.getLogger(__name__)


class CalloutEditorApp(App):
    """Minimal document editor hosting the callout picker."""

    TITLE = "callout-picker"

    DEFAULT_CSS = """
    #ribbon {
        height: 1;
        background: $panel;
    }
    #ribbon Chip {
        margin-right: 1;
    }
    #ribbon .doc-name {
        width: 1fr;
        color: $text-muted;
        padding: 0 1;
    }
    #document {
        height: 1fr;
    }
    """

    BINDINGS = [
        Binding("ctrl+o", "insert_callout", "Insert callout", priority=True),
        Binding("f2", "toggle_settings", "Callout settings", priority=True),
        Binding("ctrl+s", "save_document", "Save", priority=True),
    ]

    def __init__(
        self,
        plugin_data: PluginDataHost,
        document_path: Optional[Path] = None,
        text: str = "",
    ):
        super().__init__()
        self._document_path = document_path
        self._initial_text = text
        logger.info("Loading callout picker")
        self.registry = callout_picker.app.registry.create(
            plugin_data, notifier=self._acknowledge
        )

    def _acknowledge(self, message: str) -> None:
        self.notify(message, timeout=2)

    # ─── Lifecycle ─────────────────────────────────────────────────────

    def get_system_commands(self, screen):
        yield from super().get_system_commands(screen)
        yield SystemCommand(
            "Insert callout", "Insert a specific callout (ctrl+o)", self.action_insert_callout
        )
        yield SystemCommand(
            "Callout settings", "Select which callouts are shown (f2)", self.action_toggle_settings
        )

    def compose(self) -> ComposeResult:
        name = str(self._document_path) if self._document_path else "untitled"
        with Horizontal(id="ribbon"):
            yield Chip(" ✎ Callout ", action="app.insert_callout", id="ribbon-callout")
            yield Static(name, classes="doc-name")
        yield TextArea(self._initial_text, id="document")
        yield Footer()

    def on_mount(self) -> None:
        self._get_document().focus()

    def _get_document(self) -> TextArea:
        return self.query_one("#document", TextArea)

    def _get_settings(self) -> CalloutSettingsPanel | None:
        try:
            return self.query_one(CalloutSettingsPanel)
        except NoMatches:
            return None

    # ─── Picker ────────────────────────────────────────────────────────

    def action_insert_callout(self) -> None:
        if isinstance(self.screen, CalloutPickerScreen):
            return
        editor = TextAreaEditor(self._get_document())
        self.push_screen(CalloutPickerScreen(self.registry, editor), self._on_picker_closed)

    def _on_picker_closed(self, callout: CalloutType | None) -> None:
        self._get_document().focus()

    # ─── Settings ──────────────────────────────────────────────────────

    def action_toggle_settings(self) -> None:
        if isinstance(self.screen, CalloutPickerScreen):
            return
        if self._get_settings() is not None:
            self._close_settings()
            return
        self.screen.mount(CalloutSettingsPanel(self.registry))

    def _close_settings(self) -> None:
        for panel in self.screen.query(CalloutSettingsPanel):
            panel.remove()
        self._get_document().focus()

    def on_callout_settings_panel_toggled(self, msg: CalloutSettingsPanel.Toggled) -> None:
        """Route a toggle to the registry, which persists it."""
        self.registry.set_enabled(msg.identifier, msg.enabled)

    def on_callout_settings_panel_closed(self, msg: CalloutSettingsPanel.Closed) -> None:
        self._close_settings()

    # ─── Document ──────────────────────────────────────────────────────

    def action_save_document(self) -> None:
        if self._document_path is None:
            self.notify("No file to save to", severity="warning")
            return
        try:
            self._document_path.write_text(self._get_document().text, encoding="utf-8")
        except OSError as e:
            logger.exception("Failed to save %s", self._document_path)
            self.notify("Save failed: {}".format(e), severity="error")
            return
        self.notify("Saved {}".format(self._document_path.name))
