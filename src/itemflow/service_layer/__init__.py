"""Service layer for ITEMFLOW.

Turns collaborator capabilities into `ItemsService` instances (source
adapters) and combines services into resilient chains (fallback, retry).
Everything here is a small value-like object implementing the same contract
as the thing it wraps.
"""

from .combinators import ItemsServiceWithFallback, fallback, retry
from .item_services import (
    CardAPIItemsService,
    FriendsAPIItemsService,
    FriendsCacheItemsService,
    ReceivedTransfersAPIItemsService,
    SentTransfersAPIItemsService,
)

__all__ = [
    "CardAPIItemsService",
    "FriendsAPIItemsService",
    "FriendsCacheItemsService",
    "ItemsServiceWithFallback",
    "ReceivedTransfersAPIItemsService",
    "SentTransfersAPIItemsService",
    "fallback",
    "retry",
]
