"""
rpsredux - Rock-Paper-Scissors on a unidirectional state container.

Two players take turns choosing a weapon. All rules live in a single
pure reducer; a store holds the current snapshot and notifies subscribers.
The package provides:
- Immutable game state
- The reducer and its beats-relation
- A store with subscriptions and replay
- Ephemeral sessions and a view projection
"""

__version__ = "0.1.0"
