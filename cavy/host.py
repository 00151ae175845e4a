"""Host component contract.

The host owns the application state the tests run against. The runner only
needs two lifecycle hooks from it: one that wipes persisted state and one
that forces a fresh render.
"""

import inspect
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Host(Protocol):
    """Application surface under test.

    Both methods may be plain functions or coroutine functions.
    """

    def clear(self) -> Any:
        """Reset persisted application state."""
        ...

    def re_render(self) -> Any:
        """Rebuild the observable application tree."""
        ...


async def maybe_await(value: Any) -> Any:
    """Await ``value`` if it is awaitable, otherwise return it unchanged."""
    if inspect.isawaitable(value):
        return await value
    return value
