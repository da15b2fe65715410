"""CLI entry point for the callout-picker demo host."""

import argparse
import logging
import sys
from pathlib import Path

import callout_picker.io.logging_setup
import callout_picker.io.plugin_data
from callout_picker.tui.app import CalloutEditorApp

logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(
        description="Edit a markdown document and insert callouts from a picker"
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Document to open (created on save if missing)",
    )
    parser.add_argument(
        "--data-file",
        type=str,
        default=None,
        help="Plugin data file (default: $XDG_CONFIG_HOME/callout-picker/data.json)",
    )
    args = parser.parse_args()

    runtime = callout_picker.io.logging_setup.configure()
    logger.debug("Logging to %s at %s", runtime.file_path, runtime.level_name)

    document_path = Path(args.path) if args.path else None
    text = ""
    if document_path is not None and document_path.exists():
        try:
            text = document_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            print("callout-picker: cannot read {}: {}".format(document_path, e), file=sys.stderr)
            sys.exit(1)

    plugin_data = callout_picker.io.plugin_data.JsonPluginData(args.data_file)
    app = CalloutEditorApp(plugin_data, document_path=document_path, text=text)
    app.run()


if __name__ == "__main__":
    main()
