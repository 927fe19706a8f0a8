"""Source adapters: one collaborator capability behind the `ItemsService` contract.

Each adapter loads entities from exactly one API or cache, maps them to
`ItemViewModel` rows whose selection reports the original entity to the
caller's ``select`` sink, and resolves its future on the display context.
Failures from the capability are forwarded untouched.
"""

import logging
from collections.abc import Callable
from concurrent.futures import Future
from dataclasses import dataclass
from functools import partial

from itemflow.domain.models import Card, Friend, Transfer
from itemflow.interfaces.callback_context import CallbackContext
from itemflow.interfaces.items_service import DateStyle, ItemsService, ItemViewModel
from itemflow.interfaces.sources import CardAPI, FriendsAPI, FriendsCache, TransfersAPI

from .delivery import call_guarded, deliver_mapped
from .view_models import card_item, friend_item, transfer_item

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods


@dataclass(frozen=True)
class FriendsAPIItemsService(ItemsService):
    """Friends from the network, written through to a cache on success.

    The freshly loaded list is persisted before the items are delivered,
    whatever the cache is (the null cache simply ignores it).
    """

    api: FriendsAPI
    cache: FriendsCache
    select: Callable[[Friend], None]
    context: CallbackContext

    def load_items(self) -> Future[list[ItemViewModel]]:
        logger.debug("Loading friends from %s", type(self.api).__name__)
        return deliver_mapped(
            call_guarded(self.api.load), self.context, self._cache_and_map
        )

    def _cache_and_map(self, friends: list[Friend]) -> list[ItemViewModel]:
        self.cache.persist(friends)
        logger.debug(
            "Persisted %d friends to %s", len(friends), type(self.cache).__name__
        )
        return [friend_item(friend, partial(self.select, friend)) for friend in friends]


@dataclass(frozen=True)
class FriendsCacheItemsService(ItemsService):
    """Friends read back from the cache. Reads never re-persist."""

    cache: FriendsCache
    select: Callable[[Friend], None]
    context: CallbackContext

    def load_items(self) -> Future[list[ItemViewModel]]:
        logger.debug("Loading friends from %s", type(self.cache).__name__)
        return deliver_mapped(call_guarded(self.cache.load), self.context, self._map)

    def _map(self, friends: list[Friend]) -> list[ItemViewModel]:
        return [friend_item(friend, partial(self.select, friend)) for friend in friends]


@dataclass(frozen=True)
class CardAPIItemsService(ItemsService):
    """Cards from the network."""

    api: CardAPI
    select: Callable[[Card], None]
    context: CallbackContext

    def load_items(self) -> Future[list[ItemViewModel]]:
        logger.debug("Loading cards from %s", type(self.api).__name__)
        return deliver_mapped(call_guarded(self.api.load), self.context, self._map)

    def _map(self, cards: list[Card]) -> list[ItemViewModel]:
        return [card_item(card, partial(self.select, card)) for card in cards]


@dataclass(frozen=True)
class SentTransfersAPIItemsService(ItemsService):
    """Transfers initiated by the user, shown with long dates."""

    api: TransfersAPI
    select: Callable[[Transfer], None]
    context: CallbackContext

    def load_items(self) -> Future[list[ItemViewModel]]:
        logger.debug("Loading sent transfers from %s", type(self.api).__name__)
        return deliver_mapped(call_guarded(self.api.load), self.context, self._map)

    def _map(self, transfers: list[Transfer]) -> list[ItemViewModel]:
        return [
            transfer_item(transfer, DateStyle.LONG, partial(self.select, transfer))
            for transfer in transfers
            if transfer.is_sender
        ]


@dataclass(frozen=True)
class ReceivedTransfersAPIItemsService(ItemsService):
    """Transfers received by the user, shown with short dates."""

    api: TransfersAPI
    select: Callable[[Transfer], None]
    context: CallbackContext

    def load_items(self) -> Future[list[ItemViewModel]]:
        logger.debug("Loading received transfers from %s", type(self.api).__name__)
        return deliver_mapped(call_guarded(self.api.load), self.context, self._map)

    def _map(self, transfers: list[Transfer]) -> list[ItemViewModel]:
        return [
            transfer_item(transfer, DateStyle.SHORT, partial(self.select, transfer))
            for transfer in transfers
            if not transfer.is_sender
        ]
