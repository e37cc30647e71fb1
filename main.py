#!/usr/bin/env python3
"""PomoTick — entry point.

Run with:
    python main.py
    python -m pomotick
"""

from pomotick.__main__ import main


if __name__ == "__main__":
    main()
