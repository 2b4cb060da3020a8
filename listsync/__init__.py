"""listsync - a list view kept in sync with an observable integer collection.

Author: Michael Economou
Date: 2026-10-19
"""

from listsync.config import APP_VERSION

__version__ = APP_VERSION
