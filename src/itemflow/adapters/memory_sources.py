"""In-memory implementations of the network API interfaces.

These stand in for real network clients. They serve a fixed list of entities
and can be told to fail a number of leading calls, which makes retry and
fallback behaviour easy to observe. Not suitable for production use.
"""

import logging
import threading
from collections.abc import Sequence
from concurrent.futures import Executor, Future
from typing import TypeVar

from itemflow.domain.models import Card, Friend, Transfer
from itemflow.interfaces.errors import SourceUnavailableError
from itemflow.interfaces.sources import CardAPI, EntitySource, FriendsAPI, TransfersAPI

logger = logging.getLogger(__name__)

T = TypeVar("T")


class _InMemorySource(EntitySource[T]):
    """Serve a fixed list of entities, optionally from a worker executor.

    Args:
        entities: The entities every successful load returns (copied).
        failures: Number of leading calls that fail with
            `SourceUnavailableError` before loads start succeeding.
        executor: When given, loads run on this executor and resolve on its
            worker thread. Otherwise the future is resolved before `load`
            returns.
    """

    def __init__(
        self,
        entities: Sequence[T] = (),
        failures: int = 0,
        executor: Executor | None = None,
    ) -> None:
        self._entities = list(entities)
        self._failures = failures
        self._executor = executor
        self._lock = threading.Lock()
        self.calls = 0

    def load(self) -> Future[list[T]]:
        with self._lock:
            self.calls += 1
            attempt = self.calls
        if self._executor is not None:
            return self._executor.submit(self._fetch, attempt)
        future: Future[list[T]] = Future()
        try:
            future.set_result(self._fetch(attempt))
        except SourceUnavailableError as e:
            future.set_exception(e)
        return future

    def _fetch(self, attempt: int) -> list[T]:
        if attempt <= self._failures:
            logger.debug("%s failing call %d", type(self).__name__, attempt)
            raise SourceUnavailableError(type(self).__name__, attempt)
        return list(self._entities)


class InMemoryFriendsAPI(_InMemorySource[Friend], FriendsAPI):
    """In-memory friends API."""


class InMemoryCardAPI(_InMemorySource[Card], CardAPI):
    """In-memory cards API."""


class InMemoryTransfersAPI(_InMemorySource[Transfer], TransfersAPI):
    """In-memory transfers API."""
