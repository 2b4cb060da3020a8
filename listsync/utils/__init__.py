"""Utility packages for listsync: events and logging."""
