"""Interface for the execution context results are delivered on.

Sources resolve their futures on whatever worker thread did the work. The
final result handed to a display-facing caller has to arrive on one designated
context (think of a UI thread), so adapters deliver through a
`CallbackContext`. When the caller is already on that context the callback
runs inline: hopping again would only reorder callbacks and could deadlock a
caller that waits on the context synchronously.
"""

import abc
from collections.abc import Callable


class CallbackContext(abc.ABC):
    """Contract for an execution context that callbacks can be sent to."""

    @abc.abstractmethod
    def is_current(self) -> bool:
        """Return True if the calling thread is running on this context."""

    @abc.abstractmethod
    def dispatch(self, fn: Callable[[], None]) -> None:
        """Schedule ``fn`` to run on this context, without waiting for it."""

    def dispatch_if_needed(self, fn: Callable[[], None]) -> None:
        """Run ``fn`` inline if already on this context, else dispatch it."""
        if self.is_current():
            fn()
        else:
            self.dispatch(fn)
