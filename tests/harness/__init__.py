"""Textual in-process test harness for callout-picker.

Re-exports all public API for convenient imports:
    from tests.harness import run_app, press_and_settle, FakePluginData, ...
"""

from tests.harness.app_runner import run_app
from tests.harness.interactions import (
    press_and_settle,
    press_sequence,
    type_text,
)
from tests.harness.fakes import FakeEditor, FakePluginData

__all__ = [
    "run_app",
    "press_and_settle",
    "press_sequence",
    "type_text",
    "FakeEditor",
    "FakePluginData",
]
