#!/usr/bin/env python3
"""
Module: listsync.__main__

This module allows the listsync package to be executed as a module using:
    python -m listsync

It serves as an alternative entry point to the root main.py script.
"""

import sys

from listsync.boot.app_factory import main

if __name__ == "__main__":
    sys.exit(main())
