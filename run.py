#!/usr/bin/env python3
"""
MOWER Launcher
===============
Run this script to start the game.
"""

from mower.main import main

if __name__ == "__main__":
    main()
