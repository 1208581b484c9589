from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")

Subscriber = Callable[[Any, Any], None]


class Observable(Generic[T]):
    """Minimal publish/subscribe holder for a snapshot value.

    Callbacks receive `(action, payload)` synchronously, in subscription order.
    """

    def __init__(self, default_data: T) -> None:
        self._data = default_data
        self._subscribers: list[Subscriber] = []

    @property
    def data(self) -> T:
        return self._data

    @data.setter
    def data(self, value: T) -> None:
        self._data = value

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        if callback not in self._subscribers:
            self._subscribers.append(callback)

        def _unsubscribe() -> None:
            self.unsubscribe(callback)

        return _unsubscribe

    def unsubscribe(self, callback: Subscriber) -> None:
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    def notify(self, action: Any, payload: Any = None) -> None:
        # Copy so callbacks may unsubscribe while being notified.
        for callback in tuple(self._subscribers):
            callback(action, payload)
