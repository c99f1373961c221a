#!/usr/bin/env python3
"""
Entry point for the Calculator application.

Run from the repository root:

    python main.py

Set CALC_LOG_LEVEL=DEBUG to trace every token the engine applies.
"""
import logging
import sys
from pathlib import Path

# Ensure the repo root is on sys.path so backend/frontend import when run as a script
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend import config
from frontend.gui import CalculatorGUI


def main():
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    app = CalculatorGUI()
    app.mainloop()


if __name__ == "__main__":
    main()
