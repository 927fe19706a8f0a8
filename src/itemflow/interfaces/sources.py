"""Interfaces for the collaborators that supply domain entities.

Network APIs and caches are opaque to the loading layer: each one only has to
start a load and resolve a future with a list of entities, or with the error
that prevented it. Futures may be resolved on any thread.
"""

import abc
from concurrent.futures import Future
from typing import Generic, TypeVar

from itemflow.domain.models import Card, Friend, Transfer

# pylint: disable=too-few-public-methods

T = TypeVar("T")


class EntitySource(abc.ABC, Generic[T]):
    """Contract for a source that asynchronously loads a list of entities."""

    @abc.abstractmethod
    def load(self) -> Future[list[T]]:
        """Start loading the entities.

        Returns:
            A future resolved with the entities, or with the load failure.
        """


class FriendsAPI(EntitySource[Friend]):
    """Remote source of the user's friends."""


class CardAPI(EntitySource[Card]):
    """Remote source of the user's cards."""


class TransfersAPI(EntitySource[Transfer]):
    """Remote source of all of the user's transfers, sent and received."""


class FriendsCache(EntitySource[Friend]):
    """Local store holding the last list of friends fetched from the network."""

    @abc.abstractmethod
    def persist(self, friends: list[Friend]) -> None:
        """Replace the cached list of friends.

        Args:
            friends: The freshly loaded friends.
        """
