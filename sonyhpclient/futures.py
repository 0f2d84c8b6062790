"""A future wrapper that allows only one pending action at a time."""

from __future__ import annotations

import concurrent.futures
import threading
from collections.abc import Callable
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class SingleInstanceFuture(Generic[T]):
    """Runs one background action at a time and holds its result until taken.

    The future is *valid* from the moment an action is started until its
    result is taken with :meth:`get` (or it is cleared with :meth:`reset`).
    Starting a new action while the future is valid is an error.
    """

    def __init__(self, name: str = "<unnamed>") -> None:
        self.name = name
        self._future: concurrent.futures.Future[T] | None = None

    def set_from_async(self, func: Callable[..., T], *args: Any) -> None:
        """Start ``func(*args)`` on a background thread."""
        if self.valid():
            raise RuntimeError(
                "The asynchronous action was cancelled before it finished executing"
            )
        future: concurrent.futures.Future[T] = concurrent.futures.Future()

        def run() -> None:
            if not future.set_running_or_notify_cancel():
                return
            try:
                result = func(*args)
            except BaseException as exc:  # handed to whoever calls get()
                future.set_exception(exc)
            else:
                future.set_result(result)

        self._future = future
        threading.Thread(target=run, name=f"future-{self.name}", daemon=True).start()

    def valid(self) -> bool:
        """True while an action has been started and its result not yet taken."""
        return self._future is not None

    def ready(self) -> bool:
        """True if the future is valid and its action has finished."""
        return self._future is not None and self._future.done()

    def _require(self) -> concurrent.futures.Future[T]:
        if self._future is None:
            raise RuntimeError(f"Future '{self.name}' has no asynchronous result")
        return self._future

    def get(self) -> T:
        """Wait for the result, take it and invalidate the future.

        An exception raised by the action is raised here.
        """
        future = self._require()
        self._future = None
        return future.result()

    def wait(self) -> None:
        """Block until the action has finished."""
        concurrent.futures.wait((self._require(),))

    def reset(self) -> None:
        """Forget the pending action without taking its result."""
        self._future = None