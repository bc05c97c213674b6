#!/usr/bin/env python3
"""TimeTracker — entry point.

Run with:
    python main.py
    python -m timetracker
"""

from timetracker.__main__ import main


if __name__ == "__main__":
    main()
