"""Fixtures for ItemsService contract tests.

Every source adapter is built twice over the same data: once over a
succeeding collaborator and once over a failing one. Sources resolve on a
worker pool and results are delivered on a dedicated callback thread, as in
an application.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

import pytest

from itemflow.adapters.callback_contexts import ExecutorCallbackContext
from itemflow.adapters.friends_cache import InMemoryFriendsCache
from itemflow.adapters.memory_sources import (
    InMemoryCardAPI,
    InMemoryFriendsAPI,
    InMemoryTransfersAPI,
)
from itemflow.interfaces.items_service import ItemsService
from itemflow.service_layer.item_services import (
    CardAPIItemsService,
    FriendsAPIItemsService,
    FriendsCacheItemsService,
    ReceivedTransfersAPIItemsService,
    SentTransfersAPIItemsService,
)
from tests.fixtures.datagen import card, friend, transfer

# pylint: disable=redefined-outer-name


@dataclass
class AdapterCase:
    """A service under test plus what it should deliver."""

    service: ItemsService
    expected_entities: list
    selections: list


@pytest.fixture
def pool() -> Iterator[ThreadPoolExecutor]:
    """Worker threads standing in for the network."""
    with ThreadPoolExecutor(max_workers=4, thread_name_prefix="net") as executor:
        yield executor


@pytest.fixture
def ui_context() -> Iterator[ExecutorCallbackContext]:
    """The designated delivery context."""
    ctx = ExecutorCallbackContext(name="ui")
    yield ctx
    ctx.shutdown()


def _build(
    kind: str,
    failures: int,
    pool: ThreadPoolExecutor,
    ui_context: ExecutorCallbackContext,
) -> AdapterCase:
    selections: list = []
    friends = [friend(name="Bob"), friend(name="Mary")]
    transfers = [
        transfer(is_sender=True),
        transfer(is_sender=False),
        transfer(is_sender=True),
    ]
    match kind:
        case "friends-api":
            service: ItemsService = FriendsAPIItemsService(
                api=InMemoryFriendsAPI(friends, failures=failures, executor=pool),
                cache=InMemoryFriendsCache(),
                select=selections.append,
                context=ui_context,
            )
            expected = friends
        case "friends-cache":
            service = FriendsCacheItemsService(
                cache=InMemoryFriendsCache(None if failures else friends),
                select=selections.append,
                context=ui_context,
            )
            expected = friends
        case "cards":
            cards = [card(), card(number="**** 0000")]
            service = CardAPIItemsService(
                api=InMemoryCardAPI(cards, failures=failures, executor=pool),
                select=selections.append,
                context=ui_context,
            )
            expected = cards
        case "sent":
            service = SentTransfersAPIItemsService(
                api=InMemoryTransfersAPI(transfers, failures=failures, executor=pool),
                select=selections.append,
                context=ui_context,
            )
            expected = [t for t in transfers if t.is_sender]
        case "received":
            service = ReceivedTransfersAPIItemsService(
                api=InMemoryTransfersAPI(transfers, failures=failures, executor=pool),
                select=selections.append,
                context=ui_context,
            )
            expected = [t for t in transfers if not t.is_sender]
        case _:
            raise ValueError(f"unknown adapter kind: {kind}")
    return AdapterCase(service, expected, selections)


ADAPTER_KINDS = ["friends-api", "friends-cache", "cards", "sent", "received"]


@pytest.fixture(params=ADAPTER_KINDS)
def make_case(
    request: pytest.FixtureRequest,
    pool: ThreadPoolExecutor,
    ui_context: ExecutorCallbackContext,
) -> Callable[..., AdapterCase]:
    """Return a builder for the requested adapter kind.

    ``make_case(failing=True)`` builds the adapter over a collaborator whose
    load fails.
    """

    def _make(failing: bool = False) -> AdapterCase:
        return _build(request.param, 1 if failing else 0, pool, ui_context)

    return _make
