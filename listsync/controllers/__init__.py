"""Controllers package: UI-agnostic handlers for user actions."""

from listsync.controllers.item_list_controller import ItemListController

__all__ = ["ItemListController"]
