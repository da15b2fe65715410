"""Plugin data file I/O for callout-picker.

Manages the JSON record at XDG_CONFIG_HOME/callout-picker/data.json.
The record is a flat mapping of callout identifier to enabled flag; keys the
current code does not know are written back untouched.

This module is a STABLE BOUNDARY.
Import as: import callout_picker.io.plugin_data
"""

import json
import os
import tempfile
from pathlib import Path


def get_data_path() -> Path:
    """Return path to the plugin data file.

    Uses XDG_CONFIG_HOME (default ~/.config) / callout-picker / data.json.
    """
    config_home = os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return Path(config_home) / "callout-picker" / "data.json"


class JsonPluginData:
    """PluginDataHost backed by a JSON file."""

    def __init__(self, path: Path | str | None = None):
        self._path = Path(path) if path is not None else get_data_path()

    @property
    def path(self) -> Path:
        return self._path

    def read_plugin_data(self) -> dict | None:
        """Return the decoded record, or None if the file does not exist.

        Malformed JSON raises json.JSONDecodeError (a ValueError); the caller
        decides how to recover.
        """
        try:
            text = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        return json.loads(text)

    def write_plugin_data(self, data: dict) -> None:
        """Atomic write of the record.

        Creates parent directories if needed. Writes to temp file then renames
        to avoid partial writes on crash.
        """
        path = self._path
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=path.parent, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
                f.write("\n")
            os.replace(tmp_path, path)
        except Exception:
            # Clean up temp file on failure
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
            raise
