"""Models package: the observable item collection, its change events and
the Qt list model that mirrors it.
"""

from listsync.models.change import Change, DeletedAt, InsertedAt
from listsync.models.observable_list import ObservableList

__all__ = ["Change", "DeletedAt", "InsertedAt", "ObservableList"]
