"""Compose the loading strategy of every list according to the user tier."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from itemflow import config
from itemflow.adapters.friends_cache import NullFriendsCache
from itemflow.domain.models import Card, Friend, Transfer
from itemflow.interfaces.callback_context import CallbackContext
from itemflow.interfaces.items_service import ItemsService
from itemflow.interfaces.sources import CardAPI, FriendsAPI, FriendsCache, TransfersAPI
from itemflow.service_layer.combinators import fallback, retry
from itemflow.service_layer.item_services import (
    CardAPIItemsService,
    FriendsAPIItemsService,
    FriendsCacheItemsService,
    ReceivedTransfersAPIItemsService,
    SentTransfersAPIItemsService,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Collaborators:
    """The external capabilities the lists load from."""

    friends_api: FriendsAPI
    friends_cache: FriendsCache
    card_api: CardAPI
    transfers_api: TransfersAPI


@dataclass(frozen=True)
class SelectionSinks:
    """Where the selection of each kind of entity is reported."""

    friend: Callable[[Friend], None]
    card: Callable[[Card], None]
    transfer: Callable[[Transfer], None]


@dataclass(frozen=True)
class ListServices:
    """One fully composed service per list screen."""

    friends: ItemsService
    sent_transfers: ItemsService
    received_transfers: ItemsService
    cards: ItemsService


def build_friends_service(
    *,
    is_premium: bool,
    api: FriendsAPI,
    cache: FriendsCache,
    select: Callable[[Friend], None],
    context: CallbackContext,
) -> ItemsService:
    """Build the friends list service for the given tier.

    Premium users load from the network (retried) with every success written
    to ``cache``, and fall back to reading ``cache`` once the network attempts
    are exhausted. Other users load from the network (retried) with caching
    switched off and no fallback.
    """
    api_service = retry(
        FriendsAPIItemsService(
            api=api,
            cache=cache if is_premium else NullFriendsCache(),
            select=select,
            context=context,
        ),
        config.FRIENDS_RETRY_COUNT,
    )
    if not is_premium:
        logger.debug("Friends: network only, caching disabled")
        return api_service

    logger.debug("Friends: network with write-through, falling back to the cache")
    cache_service = FriendsCacheItemsService(
        cache=cache, select=select, context=context
    )
    return fallback(api_service, cache_service)


def build_sent_transfers_service(
    *,
    api: TransfersAPI,
    select: Callable[[Transfer], None],
    context: CallbackContext,
) -> ItemsService:
    """Build the sent transfers list service (retried, no fallback)."""
    return retry(
        SentTransfersAPIItemsService(api=api, select=select, context=context),
        config.TRANSFERS_RETRY_COUNT,
    )


def build_received_transfers_service(
    *,
    api: TransfersAPI,
    select: Callable[[Transfer], None],
    context: CallbackContext,
) -> ItemsService:
    """Build the received transfers list service (retried, no fallback)."""
    return retry(
        ReceivedTransfersAPIItemsService(api=api, select=select, context=context),
        config.TRANSFERS_RETRY_COUNT,
    )


def build_cards_service(
    *,
    api: CardAPI,
    select: Callable[[Card], None],
    context: CallbackContext,
) -> ItemsService:
    """Build the cards list service (no retry, no fallback)."""
    return CardAPIItemsService(api=api, select=select, context=context)


def bootstrap(
    *,
    is_premium: bool,
    collaborators: Collaborators,
    sinks: SelectionSinks,
    context: CallbackContext,
) -> ListServices:
    """Compose the services of every list.

    Args:
        is_premium: Whether the user is on the premium tier.
        collaborators: APIs and cache to load from.
        sinks: Selection callbacks per entity kind.
        context: Context the lists receive their results on.

    Returns:
        ListServices: The composed services.
    """
    logger.debug("Composing list services (premium=%s)", is_premium)
    return ListServices(
        friends=build_friends_service(
            is_premium=is_premium,
            api=collaborators.friends_api,
            cache=collaborators.friends_cache,
            select=sinks.friend,
            context=context,
        ),
        sent_transfers=build_sent_transfers_service(
            api=collaborators.transfers_api, select=sinks.transfer, context=context
        ),
        received_transfers=build_received_transfers_service(
            api=collaborators.transfers_api, select=sinks.transfer, context=context
        ),
        cards=build_cards_service(
            api=collaborators.card_api, select=sinks.card, context=context
        ),
    )
