"""
Display/input controller for the calculator.

State lives in an immutable CalculatorState. Every button click or key press
is normalized to a Command and passed to reduce(), which returns the next
state. CalculatorStore keeps the current state and notifies subscribers (the
GUI) after each command.
"""

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Callable, List, Optional, Tuple

from backend.engine import (
    CalculatorError,
    evaluate,
    format_number,
    parse_number,
)

logger = logging.getLogger(__name__)


class Command(Enum):
    """One member per keypad button; the value is the button label."""

    CLEAR = "C"
    MODULO = "%"
    DIVIDE = "/"
    MULTIPLY = "*"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    SUBTRACT = "-"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    ADD = "+"
    ONE = "1"
    TWO = "2"
    THREE = "3"
    EQUALS = "="
    ZERO = "0"
    DECIMAL = "."

    @property
    def is_operator(self) -> bool:
        return self.value in OPERATOR_SYMBOLS


OPERATOR_SYMBOLS = ("+", "-", "*", "/", "%")

# Keypad order, four buttons per row
BUTTON_LAYOUT: Tuple[Command, ...] = tuple(Command)

# Printable characters that map straight onto a command
KEY_COMMANDS = {c.value: c for c in Command}
KEY_COMMANDS.update({
    "c": Command.CLEAR,
    "\r": Command.EQUALS,
    "\n": Command.EQUALS,
    "\b": Command.CLEAR,
})

# Tk keysyms for keys whose char is empty or platform dependent
KEYSYM_COMMANDS = {
    "Return": Command.EQUALS,
    "KP_Enter": Command.EQUALS,
    "BackSpace": Command.CLEAR,
}


def command_for_key(char: str, keysym: Optional[str] = None) -> Optional[Command]:
    """Map a key press to a Command, or None if the key is not handled."""
    if char and char in KEY_COMMANDS:
        return KEY_COMMANDS[char]
    if keysym:
        return KEYSYM_COMMANDS.get(keysym)
    return None


@dataclass(frozen=True)
class HistoryEntry:
    left: float
    operator: str
    right: float
    result: float

    def __str__(self) -> str:
        return (f"{format_number(self.left)} {self.operator} "
                f"{format_number(self.right)} = {format_number(self.result)}")


@dataclass(frozen=True)
class CalculatorState:
    display_text: str = "0"
    pending_operator: Optional[str] = None
    accumulator: float = 0.0
    start_new_number: bool = True
    history: Tuple[HistoryEntry, ...] = field(default_factory=tuple)
    error: Optional[str] = None  # description of the last error, for the status bar

    @property
    def has_error(self) -> bool:
        return self.error is not None


# -------------------------
# Operations
# -------------------------
def press_digit(state: CalculatorState, digit: str) -> CalculatorState:
    if state.start_new_number:
        if digit == "0":
            return replace(state, display_text="0")
        return replace(state, display_text=digit, start_new_number=False)
    if state.display_text == "0":
        if digit == "0":
            return state
        return replace(state, display_text=digit)
    return replace(state, display_text=state.display_text + digit)


def press_decimal(state: CalculatorState) -> CalculatorState:
    if state.start_new_number:
        return replace(state, display_text="0.", start_new_number=False)
    if "." in state.display_text:
        return state
    return replace(state, display_text=state.display_text + ".")


def _fail(state: CalculatorState, error: CalculatorError) -> CalculatorState:
    """Show an error on the display and drop back to the idle state."""
    logger.info("%s: %s", error.description, error)
    return replace(
        state,
        display_text=error.display_text,
        pending_operator=None,
        start_new_number=True,
        error=error.description,
    )


def _apply_pending(state: CalculatorState) -> CalculatorState:
    """
    Evaluate the pending operator against the accumulator and the displayed
    value. Raises CalculatorError; the caller turns it into display state.
    """
    right = parse_number(state.display_text)
    result = evaluate(state.accumulator, right, state.pending_operator)
    display_text = format_number(result)
    entry = HistoryEntry(state.accumulator, state.pending_operator, right, result)
    return replace(
        state,
        display_text=display_text,
        accumulator=result,
        history=state.history + (entry,),
    )


def press_operator(state: CalculatorState, op: str) -> CalculatorState:
    try:
        if state.pending_operator is not None:
            state = _apply_pending(state)
        else:
            state = replace(state, accumulator=parse_number(state.display_text))
    except CalculatorError as e:
        return _fail(state, e)
    return replace(state, pending_operator=op, start_new_number=True)


def press_equals(state: CalculatorState) -> CalculatorState:
    if state.pending_operator is None:
        return state
    try:
        state = _apply_pending(state)
    except CalculatorError as e:
        return _fail(state, e)
    return replace(state, pending_operator=None, start_new_number=True)


def press_clear(state: CalculatorState) -> CalculatorState:
    # History is append-only for the whole session
    return CalculatorState(history=state.history)


def reduce(state: CalculatorState, command: Command) -> CalculatorState:
    """Return the state that follows `state` after `command`."""
    if state.has_error:
        state = replace(state, error=None)
    if command is Command.CLEAR:
        return press_clear(state)
    if command.is_operator:
        return press_operator(state, command.value)
    if command is Command.EQUALS:
        return press_equals(state)
    if command is Command.DECIMAL:
        return press_decimal(state)
    return press_digit(state, command.value)


# -------------------------
# Store
# -------------------------
Listener = Callable[[CalculatorState], None]


class CalculatorStore:
    """Holds the current state and notifies listeners after every command."""

    def __init__(self, state: Optional[CalculatorState] = None):
        self.state = state or CalculatorState()
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, command: Command) -> CalculatorState:
        logger.debug("dispatch %s", command.name)
        new_state = reduce(self.state, command)
        if new_state is not self.state:
            self.state = new_state
            for listener in list(self._listeners):
                listener(new_state)
        return self.state
