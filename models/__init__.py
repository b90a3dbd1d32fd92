"""Linkman models.

- Contact: one observed (email, phone_number) submission, primary or secondary.
- IdentifierLock: per-identifier advisory lock rows used by resolve().
"""

from linkman.models.contact import Contact, LinkPrecedence
from linkman.models.identifier_lock import IdentifierLock

__all__ = [
    "Contact",
    "LinkPrecedence",
    # Concurrency control for identity resolution
    "IdentifierLock",
]
