from callout_picker.tui.chip import Chip, ToggleChip


def test_chip_default_css_has_hover_state():
    css = Chip.DEFAULT_CSS
    assert "background: $panel-lighten-2;" in css
    assert "Chip:hover" in css
    assert "opacity" not in css


def test_toggle_chip_default_css_keeps_on_off_states_visible():
    css = ToggleChip.DEFAULT_CSS
    assert "background: $accent;" in css
    assert "ToggleChip.-off" in css
    assert "background: $surface-lighten-1;" in css
    assert "opacity" not in css
