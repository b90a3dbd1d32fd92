"""Linkman services.

- identity: resolve(), view_cluster() and the cluster helpers behind them
"""

from linkman.services import identity

__all__ = ["identity"]
