"""Background event loop used to drive cadence from synchronous code."""

import asyncio
import concurrent.futures
import logging
import threading
from collections.abc import Coroutine
from typing import Any, TypeVar

logger = logging.getLogger("cadence.sync")

T = TypeVar("T")


class _LoopThread:
    """Runs an asyncio event loop forever in a daemon thread."""

    __slots__ = ("_loop", "_ready", "_thread")

    def __init__(self) -> None:
        self._loop: asyncio.AbstractEventLoop | None = None
        self._thread: threading.Thread | None = None
        self._ready = threading.Event()

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Start the loop thread. Calling it again is a no-op."""
        if self._thread is not None:
            return
        self._thread = threading.Thread(target=self._serve, name="cadence-loop", daemon=True)
        self._thread.start()
        self._ready.wait()
        logger.debug("background event loop started")

    def _serve(self) -> None:
        self._loop = asyncio.new_event_loop()
        asyncio.set_event_loop(self._loop)
        self._ready.set()
        try:
            self._loop.run_forever()
        finally:
            self._loop.close()

    def submit(self, coro: Coroutine[Any, Any, T]) -> concurrent.futures.Future[T]:
        """Schedule *coro* on the loop thread without waiting for it."""
        if self._loop is None:
            self.start()
        assert self._loop is not None
        return asyncio.run_coroutine_threadsafe(coro, self._loop)

    def run(self, coro: Coroutine[Any, Any, T], timeout: float | None = None) -> T:
        """Run *coro* on the loop thread and block until it finishes."""
        return self.submit(coro).result(timeout)

    def shutdown(self) -> None:
        """Stop the loop and join its thread."""
        if self._loop is not None:
            self._loop.call_soon_threadsafe(self._loop.stop)
        if self._thread is not None:
            self._thread.join(timeout=5.0)
            logger.debug("background event loop stopped")
        self._thread = None
        self._loop = None
        self._ready.clear()


_shared_loop = _LoopThread()


def get_shared_loop() -> _LoopThread:
    """Return the process-wide loop thread, starting it if needed."""
    _shared_loop.start()
    return _shared_loop
