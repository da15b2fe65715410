"""Protocol definitions for the host application seams.

The registry and configuration store only talk to the host through these
narrow contracts. Implementations live in the io and tui layers; tests use
plain fakes. Structural typing means implementers do not inherit from these.
"""

from typing import Callable, Protocol


PluginData = dict[str, object]

Notifier = Callable[[str], None]
"""Transient, non-blocking acknowledgment shown to the user (a toast)."""


class PluginDataHost(Protocol):
    """Durable key-value record owned by the host, one per installation."""

    def read_plugin_data(self) -> PluginData | None:
        """Return the persisted record, or None if nothing was saved yet.

        May raise OSError or ValueError for unreadable or malformed data.
        """
        ...

    def write_plugin_data(self, data: PluginData) -> None:
        """Replace the persisted record with data."""
        ...


class Editor(Protocol):
    """Handle to the document editor the callout is inserted into."""

    def get_selection(self) -> str:
        """Return the currently selected text ("" when nothing is selected)."""
        ...

    def replace_selection(self, text: str) -> None:
        """Replace the selection with text, or insert at the cursor."""
        ...
