#!/usr/bin/env python3
"""
Module: main.py

Author: Michael Economou
Date: 2026-10-19

This module serves as the entry point for the listsync application.
It configures logging, creates the Qt application and the item list window,
and starts the application's main event loop.

Functions:
    main: Initializes and runs the application.
"""

import os
import sys

# Add the project root to the path FIRST - before any local imports
project_root = os.path.normpath(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from listsync.boot.app_factory import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
