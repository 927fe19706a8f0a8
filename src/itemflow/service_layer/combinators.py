"""Combinators composing `ItemsService` instances into resilient chains.

A combinator implements `ItemsService` itself, so chains nest freely:
``fallback(retry(api, 2), cache)`` is just another service.
"""

import logging
from concurrent.futures import Future
from dataclasses import dataclass

from itemflow.interfaces.items_service import ItemsService, ItemViewModel

from .delivery import call_guarded, forward

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods


@dataclass(frozen=True)
class ItemsServiceWithFallback(ItemsService):
    """Load from ``primary``; if that fails, load from ``fallback`` instead.

    Exactly one of the two outcomes reaches the caller. A primary success is
    delivered without ever touching the fallback; after a primary failure the
    fallback's outcome (success or failure) is delivered and the primary's
    error is dropped. The result is resolved on the thread that resolved the
    winning service's future.
    """

    primary: ItemsService
    fallback: ItemsService

    def load_items(self) -> Future[list[ItemViewModel]]:
        outcome: Future[list[ItemViewModel]] = Future()

        def on_primary_done(primary: Future[list[ItemViewModel]]) -> None:
            if (error := primary.exception()) is None:
                outcome.set_result(primary.result())
                return
            logger.info(
                "%s failed (%s); falling back to %s",
                type(self.primary).__name__,
                error,
                type(self.fallback).__name__,
            )
            forward(call_guarded(self.fallback.load_items), outcome)

        call_guarded(self.primary.load_items).add_done_callback(on_primary_done)
        return outcome


def fallback(primary: ItemsService, secondary: ItemsService) -> ItemsService:
    """Return a service trying ``primary`` first and ``secondary`` on failure."""
    return ItemsServiceWithFallback(primary=primary, fallback=secondary)


def retry(service: ItemsService, count: int) -> ItemsService:
    """Return a service that loads from ``service`` up to ``count`` more times.

    Built purely from `fallback`: the service becomes its own fallback,
    ``count`` times over. Any failure triggers the next attempt immediately;
    the last attempt's outcome is delivered.

    Args:
        service: The service to retry.
        count: Number of additional attempts after the first one.

    Returns:
        ItemsService: ``service`` itself when ``count`` is 0, otherwise the chain.

    Raises:
        ValueError: If ``count`` is negative.
    """
    if count < 0:
        raise ValueError(f"retry count must be >= 0, got {count}")
    composed = service
    for _ in range(count):
        composed = fallback(composed, service)
    return composed
