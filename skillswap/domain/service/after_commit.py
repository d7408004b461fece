"""Side effects held back until the request's unit of work commits."""

from collections.abc import Callable

import logfire


class AfterCommit:
    """Queue of callbacks run once the current transaction has committed.

    The persistence layer owns the transaction, so it decides when to
    ``run`` the queue and when to ``discard`` it after a rollback.
    """

    def __init__(self) -> None:
        self._callbacks: list[Callable[[], None]] = []

    def add(self, callback: Callable[[], None]) -> None:
        self._callbacks.append(callback)

    def run(self) -> None:
        callbacks, self._callbacks = self._callbacks, []
        for callback in callbacks:
            callback()

    def discard(self) -> None:
        if self._callbacks:
            logfire.info("Discarding side effects after rollback", count=len(self._callbacks))
        self._callbacks = []
