#!/usr/bin/env python3
"""
Calculator GUI

Tkinter view for the calculator. The window holds no arithmetic state of its
own: button clicks and key presses are turned into a Command and dispatched to
a CalculatorStore, and _render() repaints the display, history log and status
bar whenever the store reports a new state.

Layout:
- Header with the product name.
- Display and 4-column keypad on the left, history log on the right.
- Footer status bar ("Ready" or the last error).
"""

import logging
import tkinter as tk
from typing import Dict, Optional

# Import the calculator backend (state, reducer, key mapping).
try:
    from backend.controller import (
        BUTTON_LAYOUT,
        CalculatorState,
        CalculatorStore,
        Command,
        command_for_key,
    )
except ImportError as e:
    raise ImportError("Could not import the calculator controller. Ensure backend.controller exists.") from e

logger = logging.getLogger(__name__)


# -------------------------
# Visual theme / constants
# -------------------------
APP_TITLE = "Calculator Pro"
WINDOW_WIDTH = 640
WINDOW_HEIGHT = 420
KEYPAD_COLUMNS = 4

BG = "#0f1113"          # main app background
PANEL_BG = "#17181A"    # panels / container background
BTN_BG = "#2b2d30"      # button tile background
BTN_HOVER_BG = "#3a3f5c"  # button tile under the mouse
FG = "#E6EEF3"          # foreground text (light)
MUTED_FG = "#9aa3a9"    # status bar text
ACCENT = "#cfeeff"      # accent color for titles, etc.

TITLE_FONT = ("Segoe UI", 16, "bold")
DISPLAY_FONT = ("Consolas", 26, "bold")
BUTTON_FONT = ("Segoe UI", 16, "bold")
HISTORY_FONT = ("Consolas", 11)
STATUS_FONT = ("Segoe UI", 10)

READY_TEXT = "Ready"


# -------------------------
# Main application class
# -------------------------
class CalculatorGUI(tk.Tk):
    def __init__(self, store: Optional[CalculatorStore] = None):
        super().__init__()

        # Window setup
        self.title(APP_TITLE)
        self.geometry(f"{WINDOW_WIDTH}x{WINDOW_HEIGHT}")
        self.minsize(480, 360)
        self.configure(bg=BG)

        self.store = store or CalculatorStore()
        self.buttons: Dict[Command, tk.Button] = {}

        # Build UI sections
        self._build_header()
        self._build_footer()
        self._build_main_frames()

        # Keyboard input goes through the same dispatch path as the buttons
        self.bind("<Key>", self._on_key)

        self._unsubscribe = self.store.subscribe(self._render)
        self._render(self.store.state)

    # -------------------------
    # Header and footer
    # -------------------------
    def _build_header(self):
        header = tk.Frame(self, bg=PANEL_BG, height=56)
        header.pack(fill="x", side="top")
        tk.Label(header, text=APP_TITLE, bg=PANEL_BG, fg=ACCENT,
                 font=TITLE_FONT).pack(side="left", padx=16, pady=10)

    def _build_footer(self):
        footer = tk.Frame(self, bg=PANEL_BG, height=28)
        footer.pack(fill="x", side="bottom")
        self.status_var = tk.StringVar(value=READY_TEXT)
        tk.Label(footer, textvariable=self.status_var, bg=PANEL_BG, fg=MUTED_FG,
                 anchor="w", font=STATUS_FONT).pack(fill="x", padx=12, pady=4)

    # -------------------------
    # Main area (calculator + history)
    # -------------------------
    def _build_main_frames(self):
        self.main_container = tk.Frame(self, bg=PANEL_BG)
        self.main_container.pack(fill="both", expand=True, padx=8, pady=8)

        calc_frame = tk.Frame(self.main_container, bg=PANEL_BG)
        calc_frame.pack(side="left", fill="both", expand=True)
        self._build_display(calc_frame)
        self._build_keypad(calc_frame)

        history_frame = tk.Frame(self.main_container, bg=PANEL_BG)
        history_frame.pack(side="right", fill="both", padx=(8, 0))
        self._build_history(history_frame)

    def _build_display(self, parent):
        self.display_var = tk.StringVar()
        tk.Label(parent, textvariable=self.display_var, bg=BG, fg=FG, anchor="e",
                 font=DISPLAY_FONT).pack(fill="x", padx=6, pady=(6, 10), ipady=8)

    def _build_keypad(self, parent):
        """
        Keypad grid of tiles. Buttons are uniform-sized by grid weight and
        laid out row by row in BUTTON_LAYOUT order.
        """
        tile_container = tk.Frame(parent, bg=PANEL_BG)
        tile_container.pack(fill="both", expand=True)
        for i, command in enumerate(BUTTON_LAYOUT):
            r, c = divmod(i, KEYPAD_COLUMNS)
            btn = tk.Button(tile_container, text=command.value, bg=BTN_BG, fg=FG,
                            activebackground=BTN_HOVER_BG, activeforeground=FG,
                            relief="flat", font=BUTTON_FONT, cursor="hand2",
                            command=lambda cmd=command: self.dispatch(cmd))
            btn.grid(row=r, column=c, sticky="nsew", padx=4, pady=4)
            # Hover highlight
            btn.bind("<Enter>", lambda e, b=btn: b.configure(bg=BTN_HOVER_BG))
            btn.bind("<Leave>", lambda e, b=btn: b.configure(bg=BTN_BG))
            self.buttons[command] = btn
            tile_container.grid_columnconfigure(c, weight=1)
            tile_container.grid_rowconfigure(r, weight=1)

    def _build_history(self, parent):
        tk.Label(parent, text="History", bg=PANEL_BG, fg=ACCENT,
                 anchor="w").pack(fill="x", padx=6, pady=(6, 0))
        frm = tk.Frame(parent, bg="#0e0f10")
        frm.pack(fill="both", expand=True)
        self.history_list = tk.Listbox(frm, bg="#0e0f10", fg=FG, font=HISTORY_FONT,
                                       width=28, activestyle="none", highlightthickness=0)
        self.history_list.pack(side="left", fill="both", expand=True, padx=6, pady=6)

        scrollbar = tk.Scrollbar(frm, command=self.history_list.yview)
        self.history_list.config(yscrollcommand=scrollbar.set)
        scrollbar.pack(side="right", fill="y")

    # -------------------------
    # Input
    # -------------------------
    def dispatch(self, command: Command):
        self.store.dispatch(command)

    def _on_key(self, event):
        """
        Translate a key press into a Command. Returns "break" for handled keys
        so Tk does not process them further.
        """
        command = command_for_key(event.char, event.keysym)
        if command is None:
            return None
        logger.debug("key %r -> %s", event.keysym, command.name)
        self.dispatch(command)
        return "break"

    # -------------------------
    # Rendering
    # -------------------------
    def _render(self, state: CalculatorState):
        self.display_var.set(state.display_text)
        self.status_var.set(state.error or READY_TEXT)

        # The log is append-only: only entries not yet shown are inserted
        shown = self.history_list.size()
        for entry in state.history[shown:]:
            self.history_list.insert("end", str(entry))
        if len(state.history) > shown:
            self.history_list.see("end")

    def destroy(self):
        self._unsubscribe()
        super().destroy()


# -------------------------
# Run the application
# -------------------------
def main():
    app = CalculatorGUI()
    app.mainloop()


if __name__ == "__main__":
    main()
