"""Friends cache implementations."""

import logging
import threading
from collections.abc import Sequence
from concurrent.futures import Future

from itemflow.domain.models import Friend
from itemflow.interfaces.errors import CacheMissError
from itemflow.interfaces.sources import FriendsCache

logger = logging.getLogger(__name__)


class InMemoryFriendsCache(FriendsCache):
    """In-memory implementation of the FriendsCache interface.

    Holds the last persisted list. Reading before anything was persisted
    fails with `CacheMissError`. Intended for testing and development; it
    does not outlive the process.
    """

    def __init__(self, friends: Sequence[Friend] | None = None) -> None:
        self._lock = threading.Lock()
        self._friends = list(friends) if friends is not None else None
        self.persist_count = 0

    def persist(self, friends: list[Friend]) -> None:
        with self._lock:
            self._friends = list(friends)
            self.persist_count += 1

    def load(self) -> Future[list[Friend]]:
        future: Future[list[Friend]] = Future()
        with self._lock:
            cached = None if self._friends is None else list(self._friends)
        if cached is None:
            logger.debug("Friends cache miss")
            future.set_exception(CacheMissError(type(self).__name__))
        else:
            future.set_result(cached)
        return future


class NullFriendsCache(FriendsCache):
    """A cache that stores nothing.

    Wired in place of the real cache to switch caching off for a user tier
    without any conditional at the call sites. Reads resolve to an empty list.
    """

    def persist(self, friends: list[Friend]) -> None:
        pass

    def load(self) -> Future[list[Friend]]:
        future: Future[list[Friend]] = Future()
        future.set_result([])
        return future
