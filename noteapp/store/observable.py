"""
Observable State.

A value holder that publishes every assignment to its subscribers.
Last value wins; subscribers see every update in emission order.

Usage:
    status = StateFlow(UiState.Loading())
    unsubscribe = status.subscribe(print)
    status.value = UiState.Success()

    async for value in status.stream():
        ...
"""

import asyncio
from collections.abc import AsyncIterator, Callable
from typing import Generic, TypeVar

ValueT = TypeVar("ValueT")


class StateFlow(Generic[ValueT]):
    """Single-writer, many-reader observable value."""

    def __init__(self, initial: ValueT) -> None:
        self._value = initial
        self._callbacks: list[Callable[[ValueT], None]] = []
        self._queues: list[asyncio.Queue[ValueT]] = []

    @property
    def value(self) -> ValueT:
        return self._value

    @value.setter
    def value(self, new_value: ValueT) -> None:
        self._value = new_value
        for callback in list(self._callbacks):
            callback(new_value)
        for queue in list(self._queues):
            queue.put_nowait(new_value)

    def subscribe(self, callback: Callable[[ValueT], None]) -> Callable[[], None]:
        """
        Call ``callback`` with every future value.

        Returns:
            A function that removes the subscription
        """
        self._callbacks.append(callback)

        def unsubscribe() -> None:
            if callback in self._callbacks:
                self._callbacks.remove(callback)

        return unsubscribe

    async def stream(self) -> AsyncIterator[ValueT]:
        """Yield the current value, then every later one, until closed."""
        queue: asyncio.Queue[ValueT] = asyncio.Queue()
        queue.put_nowait(self._value)
        self._queues.append(queue)
        try:
            while True:
                yield await queue.get()
        finally:
            self._queues.remove(queue)
