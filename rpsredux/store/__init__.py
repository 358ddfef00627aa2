"""
Store Module - Observable container around the reducer.

The store is the only holder of the current snapshot. It is created
explicitly and passed to whatever needs it; there is no global store.
"""

from .store import Store, StoreError, Subscriber, replay

__all__ = [
    "Store",
    "StoreError",
    "Subscriber",
    "replay",
]
