"""Callback contexts results can be delivered on."""

import logging
import threading
import time
from collections import deque
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor

from itemflow.interfaces.callback_context import CallbackContext

logger = logging.getLogger(__name__)


class InlineCallbackContext(CallbackContext):
    """A context every thread is already on: callbacks always run inline."""

    def is_current(self) -> bool:
        return True

    def dispatch(self, fn: Callable[[], None]) -> None:
        fn()


class ExecutorCallbackContext(CallbackContext):
    """A dedicated single worker thread, standing in for a UI thread.

    Callbacks run one at a time, in dispatch order, on the same thread.
    """

    def __init__(self, name: str = "itemflow-callbacks") -> None:
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix=name)
        self._thread_id: int = self._executor.submit(threading.get_ident).result()

    def is_current(self) -> bool:
        return threading.get_ident() == self._thread_id

    def dispatch(self, fn: Callable[[], None]) -> None:
        self._executor.submit(self._run, fn)

    @staticmethod
    def _run(fn: Callable[[], None]) -> None:
        try:
            fn()
        except Exception:  # pylint: disable=broad-except
            logger.exception("Callback raised on %s", threading.current_thread().name)
            raise

    def shutdown(self, wait: bool = True) -> None:
        """Stop the worker thread once queued callbacks have run."""
        self._executor.shutdown(wait=wait)


class RunLoopCallbackContext(CallbackContext):
    """The thread that created this context, draining a queue of callbacks.

    Dispatched callbacks wait in a queue until the owning thread calls
    `run_until`, the way a UI run loop processes posted work.
    """

    def __init__(self) -> None:
        self._owner = threading.get_ident()
        self._pending: deque[Callable[[], None]] = deque()
        self._wakeup = threading.Condition()

    def is_current(self) -> bool:
        return threading.get_ident() == self._owner

    def dispatch(self, fn: Callable[[], None]) -> None:
        with self._wakeup:
            self._pending.append(fn)
            self._wakeup.notify()

    def pending(self) -> int:
        """Return the number of dispatched callbacks waiting to run."""
        with self._wakeup:
            return len(self._pending)

    def _notify(self, _: Future) -> None:
        with self._wakeup:
            self._wakeup.notify()

    def run_until(self, future: Future, timeout: float | None = None) -> None:
        """Run queued callbacks on the owning thread until ``future`` is done.

        Args:
            future: The future to wait for.
            timeout: Maximum number of seconds to wait, or None for no limit.

        Raises:
            RuntimeError: If called from a thread other than the owner.
            TimeoutError: If ``future`` is not done within ``timeout``.
        """
        if not self.is_current():
            raise RuntimeError("run_until must be called from the owning thread")
        # a future resolved off the owning thread must wake the loop
        future.add_done_callback(self._notify)
        deadline = None if timeout is None else time.monotonic() + timeout
        while True:
            with self._wakeup:
                while not self._pending and not future.done():
                    remaining = None
                    if deadline is not None:
                        remaining = deadline - time.monotonic()
                        if remaining <= 0:
                            raise TimeoutError("future did not complete in time")
                    self._wakeup.wait(remaining)
                if future.done():
                    return
                fn = self._pending.popleft()
            fn()
