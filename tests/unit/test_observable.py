from __future__ import annotations

from src.app.observable import Observable


def test_notify_calls_subscribers_in_order_with_payload() -> None:
    obs: Observable[list[int]] = Observable(default_data=[])
    calls: list[tuple[str, object, object]] = []

    obs.subscribe(lambda action, payload: calls.append(("first", action, payload)))
    obs.subscribe(lambda action, payload: calls.append(("second", action, payload)))
    obs.notify("init")
    obs.notify("add", 42)

    assert calls == [
        ("first", "init", None),
        ("second", "init", None),
        ("first", "add", 42),
        ("second", "add", 42),
    ]


def test_unsubscribe_handle_stops_notifications() -> None:
    obs: Observable[int] = Observable(default_data=0)
    seen: list[object] = []

    unsubscribe = obs.subscribe(lambda action, payload: seen.append(action))
    obs.notify("a")
    unsubscribe()
    obs.notify("b")
    unsubscribe()  # second call is a no-op

    assert seen == ["a"]


def test_same_callback_is_registered_once() -> None:
    obs: Observable[int] = Observable(default_data=0)
    seen: list[object] = []

    def cb(action, payload) -> None:
        seen.append(action)

    obs.subscribe(cb)
    obs.subscribe(cb)
    obs.notify("x")

    assert seen == ["x"]


def test_subscriber_may_unsubscribe_during_notify() -> None:
    obs: Observable[int] = Observable(default_data=0)
    seen: list[str] = []

    def once(action, payload) -> None:
        seen.append("once")
        obs.unsubscribe(once)

    obs.subscribe(once)
    obs.subscribe(lambda action, payload: seen.append("always"))
    obs.notify("x")
    obs.notify("y")

    assert seen == ["once", "always", "always"]


def test_data_holds_current_value() -> None:
    obs: Observable[tuple[int, ...]] = Observable(default_data=())
    assert obs.data == ()
    obs.data = (1, 2)
    assert obs.data == (1, 2)
