"""
Smoke tests for the Tkinter view. Skipped when no display is available.
"""

from types import SimpleNamespace

import pytest

tk = pytest.importorskip("tkinter")

from backend.controller import Command  # noqa: E402


@pytest.fixture
def app():
    from frontend.gui import CalculatorGUI

    try:
        gui = CalculatorGUI()
    except tk.TclError:
        pytest.skip("no display available")
    gui.withdraw()
    yield gui
    gui.destroy()


def key(char, keysym=None):
    return SimpleNamespace(char=char, keysym=keysym or char)


class TestCalculatorGUI:

    def test_initial_render(self, app):
        assert app.display_var.get() == "0"
        assert app.status_var.get() == "Ready"
        assert app.history_list.size() == 0

    def test_buttons_update_display_and_history(self, app):
        for label in ("5", "+", "3", "="):
            app.buttons[Command(label)].invoke()
        assert app.display_var.get() == "8"
        assert app.history_list.get(0) == "5 + 3 = 8"

    def test_keyboard_input(self, app):
        for event in (key("6"), key("/"), key("0"), key("\r", "Return")):
            assert app._on_key(event) == "break"
        assert app.display_var.get() == "Err: Div by 0"
        assert app.status_var.get() == "Division by zero"
        assert app.history_list.size() == 0

    def test_unhandled_key_is_not_consumed(self, app):
        assert app._on_key(key("", "Shift_L")) is None
        assert app.display_var.get() == "0"

    def test_history_is_appended_not_redrawn(self, app):
        for label in ("2", "*", "3", "=", "C", "4", "-", "1", "="):
            app.dispatch(Command(label))
        assert app.history_list.get(0, "end") == ("2 * 3 = 6", "4 - 1 = 3")
        assert app.status_var.get() == "Ready"
