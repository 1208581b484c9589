from __future__ import annotations

from typing import Callable, Iterable, TypeVar

T = TypeVar("T")


def update_item(
    source: Iterable[T], value: T, compare: Callable[[T], bool] | None = None
) -> tuple[T, ...]:
    """Return a new tuple with matching elements replaced by `value`.

    Without `compare`, an element matches when it is `value` itself.
    Non-matching elements are kept as the same objects.
    """

    if compare is None:
        compare = lambda current: current is value  # noqa: E731
    return tuple(value if compare(current) else current for current in source)
