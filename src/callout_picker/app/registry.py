"""Callout registry — catalog, live configuration, suggestion filter.

// [LAW:one-source-of-truth] The registry owns the only in-memory configuration.
// [LAW:single-enforcer] set_enabled() is the only mutation path (mutate, then persist).
"""

from __future__ import annotations

import logging
import threading
from types import MappingProxyType
from typing import Iterable, Mapping

from callout_picker.app.host import Editor, Notifier, PluginDataHost
from callout_picker.app.settings_store import ConfigurationStore
from callout_picker.core.catalog import CATALOG, CalloutType, check_unique, render_callout

logger = logging.getLogger(__name__)


class UnknownCalloutError(KeyError):
    """Identifier is not part of the catalog."""


class CalloutRegistry:
    """Static catalog plus the enabled flag for each entry."""

    def __init__(
        self,
        store: ConfigurationStore,
        catalog: Iterable[CalloutType] = CATALOG,
        notifier: Notifier | None = None,
    ):
        self._catalog = tuple(catalog)
        check_unique(self._catalog)
        self._by_id = {c.identifier: c for c in self._catalog}
        self._store = store
        self._notifier = notifier
        self._lock = threading.Lock()
        self._config = store.load()

    @property
    def catalog(self) -> tuple[CalloutType, ...]:
        return self._catalog

    @property
    def configuration(self) -> Mapping[str, object]:
        """Read-only snapshot of the current configuration."""
        return MappingProxyType(dict(self._config))

    def get(self, identifier: str) -> CalloutType:
        try:
            return self._by_id[identifier]
        except KeyError:
            raise UnknownCalloutError(identifier) from None

    def is_enabled(self, identifier: str) -> bool:
        return self._config.get(identifier, True) is True

    def suggest(self, query: str) -> list[CalloutType]:
        """Enabled callouts whose identifier contains query, in catalog order.

        Matching is a case-insensitive substring test. An empty query matches
        every enabled callout.
        """
        needle = query.lower()
        return [
            c for c in self._catalog
            if self.is_enabled(c.identifier) and needle in c.identifier.lower()
        ]

    def set_enabled(self, identifier: str, value: bool) -> None:
        """Flip one callout's enabled flag and persist the whole configuration."""
        if identifier not in self._by_id:
            raise UnknownCalloutError(identifier)
        with self._lock:
            self._config[identifier] = bool(value)
            self._store.save(self._config)
        logger.info("Callout %s %s", identifier, "enabled" if value else "disabled")

    def choose(self, callout: CalloutType, editor: Editor) -> None:
        """Acknowledge the selection and insert the callout into the editor.

        Selected text, if any, becomes the callout body.
        """
        logger.info("Inserting %s callout", callout.identifier)
        if self._notifier is not None:
            self._notifier("Selected {}".format(callout.identifier))
        body = editor.get_selection()
        editor.replace_selection(render_callout(callout, body))


def create(
    host: PluginDataHost,
    catalog: Iterable[CalloutType] = CATALOG,
    notifier: Notifier | None = None,
) -> CalloutRegistry:
    """Create a registry seeded from the host's persisted plugin data."""
    catalog = tuple(catalog)
    store = ConfigurationStore(host, (c.identifier for c in catalog))
    return CalloutRegistry(store, catalog, notifier=notifier)
