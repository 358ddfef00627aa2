"""
Store - Observable container for the current game state.

The store:
1. Holds exactly one snapshot
2. Runs the reducer for each dispatched action
3. Records dispatched actions for replay
4. Notifies subscribers with the new snapshot

Dispatch is synchronous. An action dispatched while another is still
being processed (from a reducer or a subscriber) is rejected.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Iterable
import logging

from ..engine_core.state import GameState
from ..engine_core.action import Action
from ..engine_core.reducer import reduce

log = logging.getLogger(__name__)

Reducer = Callable[[GameState | None, Any], GameState]
Subscriber = Callable[[GameState], None]


class StoreError(Exception):
    """Raised when the store is used in a way that breaks dispatch ordering."""


@dataclass
class _Subscription:
    subscriber: Subscriber
    skip_repeats: bool
    last_seen: GameState | None = None

    def notify(self, state: GameState):
        if self.skip_repeats and self.last_seen is not None and self.last_seen == state:
            return
        self.last_seen = state
        self.subscriber(state)


class Store:
    """
    Holds the current state and applies the reducer.

    Usage:
        store = Store()
        unsubscribe = store.subscribe(lambda state: print(state.message))
        store.dispatch(Action.choose(Weapon.ROCK))
    """

    def __init__(self, reducer: Reducer = reduce, state: GameState | None = None):
        self._reducer = reducer
        self._subscriptions: list[_Subscription] = []
        self._is_dispatching = False
        self.action_history: list[Any] = []

        if state is None:
            state = self._reducer(None, Action.init())
        self._state = state

    @property
    def state(self) -> GameState:
        return self._state

    def dispatch(self, action: Any) -> GameState:
        """
        Apply an action and notify subscribers.

        Returns the new state.
        """
        if self._is_dispatching:
            raise StoreError(
                f"Cannot dispatch {action!r} while a previous action is being processed"
            )

        self._is_dispatching = True
        try:
            previous = self._state
            self._state = self._reducer(previous, action)
        finally:
            self._is_dispatching = False

        self.action_history.append(action)
        if self._state is previous:
            log.debug("Dispatched %r: state unchanged", action)
        else:
            log.debug("Dispatched %r: %s -> %s", action, previous.phase.value, self._state.phase.value)

        self._is_dispatching = True
        try:
            for subscription in list(self._subscriptions):
                subscription.notify(self._state)
        finally:
            self._is_dispatching = False

        return self._state

    def subscribe(self, subscriber: Subscriber, skip_repeats: bool = True) -> Callable[[], None]:
        """
        Register a subscriber and send it the current state.

        Returns a callable that removes the subscription.
        """
        subscription = _Subscription(subscriber=subscriber, skip_repeats=skip_repeats)
        self._subscriptions.append(subscription)
        subscription.notify(self._state)
        return lambda: self.unsubscribe(subscriber)

    def unsubscribe(self, subscriber: Subscriber):
        """Remove a subscriber. Unknown subscribers are ignored."""
        self._subscriptions = [
            s for s in self._subscriptions if s.subscriber != subscriber
        ]

    @property
    def subscriber_count(self) -> int:
        return len(self._subscriptions)


def replay(
    actions: Iterable[Any],
    reducer: Reducer = reduce,
    state: GameState | None = None,
) -> Store:
    """Build a store and dispatch each action in order."""
    store = Store(reducer=reducer, state=state)
    for action in actions:
        store.dispatch(action)
    return store
