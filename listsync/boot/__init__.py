"""Boot layer - Application composition root.

The only place where the list, controller and window are created and
wired together.

Author: Michael Economou
Date: 2026-10-19
"""

from listsync.boot.app_factory import create_main_window, get_user_config_dir, main

__all__ = ["create_main_window", "get_user_config_dir", "main"]
