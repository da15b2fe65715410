"""Editor adapter — exposes a Textual TextArea through the Editor protocol."""

from textual.widgets import TextArea


class TextAreaEditor:
    """Editor handle over a TextArea's current selection."""

    def __init__(self, text_area: TextArea):
        self._text_area = text_area

    def get_selection(self) -> str:
        return self._text_area.selected_text

    def replace_selection(self, text: str) -> None:
        start, end = self._text_area.selection
        self._text_area.replace(text, start, end)
