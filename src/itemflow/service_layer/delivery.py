"""Helpers for resolving outward futures from inner ones.

Both helpers guarantee that the outward future is resolved exactly once and
that failures pass through unchanged.
"""

import logging
from collections.abc import Callable
from concurrent.futures import Future
from typing import TypeVar

from itemflow.interfaces.callback_context import CallbackContext

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


def deliver_mapped(
    source: Future[T], context: CallbackContext, transform: Callable[[T], R]
) -> Future[R]:
    """Map the outcome of ``source`` and resolve a new future on ``context``.

    When ``source`` succeeds, ``transform`` runs on ``context`` with its
    result and the returned value resolves the outward future. When
    ``source`` fails, its exception resolves the outward future as is.
    An exception raised by ``transform`` itself is delivered as the failure.

    Args:
        source: Future of the wrapped capability.
        context: Context the outward future is resolved on.
        transform: Mapping (with any side effects) applied to a success.

    Returns:
        Future[R]: The outward future.
    """
    outcome: Future[R] = Future()

    def complete() -> None:
        if (error := source.exception()) is not None:
            outcome.set_exception(error)
            return
        try:
            value = transform(source.result())
        except Exception as exc:  # pylint: disable=broad-except
            logger.exception("Failed to map loaded entities")
            outcome.set_exception(exc)
            return
        outcome.set_result(value)

    source.add_done_callback(lambda _: context.dispatch_if_needed(complete))
    return outcome


def call_guarded(load: Callable[[], Future[T]]) -> Future[T]:
    """Call ``load`` and return its future, turning a raise into a failed future.

    A loader that raises instead of returning a failed future still yields
    exactly one outcome, so chains waiting on it never stall.
    """
    try:
        return load()
    except Exception as exc:  # pylint: disable=broad-except
        logger.debug("%r raised instead of returning a future", load)
        failed: Future[T] = Future()
        failed.set_exception(exc)
        return failed


def forward(source: Future[T], target: Future[T]) -> None:
    """Resolve ``target`` with the outcome of ``source`` once it is done.

    Runs on whichever thread resolves ``source`` (or inline if it is already
    done).
    """

    def copy(done: Future[T]) -> None:
        if (error := done.exception()) is not None:
            target.set_exception(error)
        else:
            target.set_result(done.result())

    source.add_done_callback(copy)
