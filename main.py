#!/usr/bin/env python3
"""
Entry point for the Calculator application.

Run:

    python main.py

Set CALCULATOR_LOG_LEVEL (DEBUG, INFO, WARNING, ...) to change log verbosity.
"""
import logging
import os
import sys
from pathlib import Path

# Ensure the repo root is on sys.path so `backend` and `frontend` import when run as a script
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from frontend.gui import CalculatorGUI

LOG_LEVEL_ENV = "CALCULATOR_LOG_LEVEL"


def configure_logging():
    level_name = os.getenv(LOG_LEVEL_ENV, "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def main():
    configure_logging()
    app = CalculatorGUI()
    app.mainloop()


if __name__ == "__main__":
    main()
