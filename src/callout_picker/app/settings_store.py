"""Configuration store — enabled flag per callout, persisted through the host.

// [LAW:one-source-of-truth] Defaults derive from the catalog identifiers.
// [LAW:single-enforcer] save() is the single writer to durable storage.
"""

from __future__ import annotations

import logging
from typing import Iterable

from callout_picker.app.host import PluginData, PluginDataHost

logger = logging.getLogger(__name__)

DEFAULT_ENABLED = True


class ConfigurationStore:
    """Loads and saves the identifier → enabled mapping."""

    def __init__(self, host: PluginDataHost, identifiers: Iterable[str]):
        self._host = host
        self._identifiers = tuple(identifiers)

    def defaults(self) -> dict[str, object]:
        return {k: DEFAULT_ENABLED for k in self._identifiers}

    def load(self) -> dict[str, object]:
        """Return defaults overlaid with persisted data. Never raises.

        Unknown persisted keys are kept as-is so they survive write-through.
        """
        merged = self.defaults()
        persisted = self._read()
        for key, value in persisted.items():
            if key in merged and not isinstance(value, bool):
                logger.warning(
                    "Ignoring non-boolean value for callout %r: %r", key, value
                )
                continue
            merged[key] = value
        return merged

    def save(self, config: PluginData) -> None:
        """Write the full configuration. Catches and logs I/O errors."""
        try:
            self._host.write_plugin_data(dict(config))
        except Exception:
            logger.exception("Failed to persist callout configuration")

    def _read(self) -> dict:
        # [LAW:dataflow-not-control-flow] Always attempt read; empty dict is the "no data" value.
        try:
            raw = self._host.read_plugin_data()
        except (OSError, ValueError) as e:
            logger.warning("Unreadable callout configuration, using defaults: %s", e)
            return {}
        if raw is None:
            return {}
        if not isinstance(raw, dict):
            logger.warning(
                "Callout configuration is %s, not a mapping; using defaults",
                type(raw).__name__,
            )
            return {}
        return raw
