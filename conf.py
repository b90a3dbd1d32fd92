"""
Linkman configuration.

Usage in settings.py:
    LINKMAN = {
        "MAX_LINK_DEPTH": 16,
        "IDENTIFIER_LOCKS": True,
    }
"""

from dataclasses import dataclass
from typing import Any

from django.conf import settings


@dataclass
class LinkmanSettings:
    """Linkman configuration settings."""

    # Hops allowed when following linked_id towards a primary
    MAX_LINK_DEPTH: int = 16

    # Serialize resolve() calls sharing an email or phone number
    IDENTIFIER_LOCKS: bool = True

    # IdentifierLock cleanup
    LOCK_CLEANUP_DAYS: int = 30


def get_linkman_settings() -> LinkmanSettings:
    """Load settings from Django settings."""
    user_settings: dict[str, Any] = getattr(settings, "LINKMAN", {})
    return LinkmanSettings(**user_settings)


class _LazySettings:
    """Lazy proxy that re-reads settings on every attribute access."""

    def __getattr__(self, name):
        return getattr(get_linkman_settings(), name)


linkman_settings = _LazySettings()
