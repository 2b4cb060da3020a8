"""UI package: Qt widgets for the item list screen."""
