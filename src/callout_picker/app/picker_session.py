"""Picker session — one open/commit/close cycle of the callout picker.

State machine: OPEN → COMMITTED → CLOSED, or OPEN → CLOSED on cancel.
Suggestions are recomputed on every query change while OPEN.
"""

from __future__ import annotations

import logging
from enum import Enum

from callout_picker.app.host import Editor
from callout_picker.app.registry import CalloutRegistry
from callout_picker.core.catalog import CalloutType

logger = logging.getLogger(__name__)


class PickerPhase(Enum):
    OPEN = "open"
    COMMITTED = "committed"
    CLOSED = "closed"


class PickerClosedError(RuntimeError):
    """The session no longer accepts queries or selections."""


class PickerSession:
    def __init__(self, registry: CalloutRegistry, editor: Editor):
        self._registry = registry
        self._editor = editor
        self.phase = PickerPhase.OPEN
        self.query = ""
        self.suggestions: list[CalloutType] = registry.suggest("")

    def _require_open(self) -> None:
        if self.phase is not PickerPhase.OPEN:
            raise PickerClosedError("picker is {}".format(self.phase.value))

    def update_query(self, query: str) -> list[CalloutType]:
        self._require_open()
        self.query = query
        self.suggestions = self._registry.suggest(query)
        return self.suggestions

    def commit(self, callout: CalloutType) -> None:
        self._require_open()
        self.phase = PickerPhase.COMMITTED
        try:
            self._registry.choose(callout, self._editor)
        finally:
            self.phase = PickerPhase.CLOSED

    def cancel(self) -> None:
        if self.phase is PickerPhase.OPEN:
            logger.debug("Picker dismissed at query %r", self.query)
        self.phase = PickerPhase.CLOSED
