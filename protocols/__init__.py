"""Linkman protocols."""

from linkman.protocols.store import ContactStore

__all__ = [
    # Persistence
    "ContactStore",
]
