"""ITEMFLOW list commands: load one list and print its rows.

Each command composes the list services for the current tier from the
fixture data, loads the requested list on a pool of worker threads, and
receives the result back on the main thread (through a run-loop context)
before printing it.

Behavior
- Rows go to **stdout**, one numbered title line followed by its subtitle.
- ``--failures N`` makes the first N network calls of that list fail, to watch
  retries and the premium cache fallback at work (``-v`` shows them).
- ``--select INDEX`` fires the selection action of a row; the selected entity
  is reported on stderr.

Failure modes
- Invalid fixture file → ``ClickException``.
- The list fails to load once every retry/fallback is exhausted → error line
  on stderr, exit code 1.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path

import click

from itemflow import config
from itemflow.adapters.callback_contexts import RunLoopCallbackContext
from itemflow.adapters.fixtures import FixtureError, load_fixture
from itemflow.adapters.friends_cache import InMemoryFriendsCache
from itemflow.adapters.memory_sources import (
    InMemoryCardAPI,
    InMemoryFriendsAPI,
    InMemoryTransfersAPI,
)
from itemflow.bootstrap import Collaborators, ListServices, SelectionSinks, bootstrap
from itemflow.interfaces.items_service import ItemsService, ItemViewModel

from .helpers import error, success

logger = logging.getLogger(__name__)

LOAD_TIMEOUT_SECONDS = 30.0  # pragma: no mutate
NETWORK_WORKERS = 4  # pragma: no mutate


@dataclass(frozen=True)
class CliState:
    """Options of the top-level group shared with the list commands."""

    is_premium: bool
    data_path: Path | None


def _failures_option(fn: Callable) -> Callable:
    return click.option(
        "--failures",
        type=click.IntRange(min=0),
        default=0,
        show_default=True,
        help="Number of leading network calls of this list that fail.",
    )(fn)


def _select_option(fn: Callable) -> Callable:
    return click.option(
        "--select",
        "select_index",
        type=click.IntRange(min=1),
        default=None,
        help="Select the row with this number after loading.",
    )(fn)


def _render(items: list[ItemViewModel]) -> None:
    if not items:
        click.echo("No items.", err=True)
    for number, item in enumerate(items, start=1):
        click.echo(f"{number:>2}. {item.title}")
        click.echo(f"    {item.subtitle}")


def show_list(  # pylint: disable=too-many-locals
    state: CliState,
    *,
    label: str,
    pick: Callable[[ListServices], ItemsService],
    failing_api: str,
    failures: int,
    select_index: int | None,
) -> None:
    """Compose, load and print one list.

    Args:
        state: Group-level options.
        label: Human name of the list, used in messages.
        pick: Chooses the list's service from the composed services.
        failing_api: Which API ``failures`` applies to (friends, cards, transfers).
        failures: Number of leading calls of that API that fail.
        select_index: 1-based row to select after loading, if any.
    """
    source = state.data_path or config.sample_data()
    try:
        fixture = load_fixture(source)
    except FixtureError as e:
        raise click.ClickException(str(e)) from e

    def failures_for(api: str) -> int:
        return failures if api == failing_api else 0

    selected: list[object] = []
    context = RunLoopCallbackContext()
    with ThreadPoolExecutor(
        max_workers=NETWORK_WORKERS, thread_name_prefix="itemflow-net"
    ) as pool:
        collaborators = Collaborators(
            friends_api=InMemoryFriendsAPI(
                fixture.friends, failures=failures_for("friends"), executor=pool
            ),
            friends_cache=InMemoryFriendsCache(fixture.cached_friends),
            card_api=InMemoryCardAPI(
                fixture.cards, failures=failures_for("cards"), executor=pool
            ),
            transfers_api=InMemoryTransfersAPI(
                fixture.transfers, failures=failures_for("transfers"), executor=pool
            ),
        )
        sinks = SelectionSinks(
            friend=selected.append, card=selected.append, transfer=selected.append
        )
        services = bootstrap(
            is_premium=state.is_premium,
            collaborators=collaborators,
            sinks=sinks,
            context=context,
        )
        logger.info("Loading %s", label)
        future = pick(services).load_items()
        try:
            context.run_until(future, timeout=LOAD_TIMEOUT_SECONDS)
        except TimeoutError as e:
            raise click.ClickException(f"Timed out loading {label}") from e

    if (failure := future.exception()) is not None:
        logger.warning("Loading %s failed: %s", label, failure)
        error(f"Could not load {label}: {failure}")
        click.get_current_context().exit(1)

    items = future.result()
    logger.info("Loaded %d %s", len(items), label)
    _render(items)

    if select_index is not None:
        if select_index > len(items):
            raise click.BadParameter(
                f"{select_index} is out of range (1-{len(items)})",
                param_hint="'--select'",
            )
        items[select_index - 1].select()
        success(f"Selected {selected[-1]}")


@click.command()
@_failures_option
@_select_option
@click.pass_obj
def friends(state: CliState, failures: int, select_index: int | None) -> None:
    """List friends (premium users fall back to the cached list)."""
    show_list(
        state,
        label="friends",
        pick=lambda services: services.friends,
        failing_api="friends",
        failures=failures,
        select_index=select_index,
    )


@click.command()
@_failures_option
@_select_option
@click.pass_obj
def cards(state: CliState, failures: int, select_index: int | None) -> None:
    """List cards."""
    show_list(
        state,
        label="cards",
        pick=lambda services: services.cards,
        failing_api="cards",
        failures=failures,
        select_index=select_index,
    )


@click.command()
@_failures_option
@_select_option
@click.pass_obj
def sent(state: CliState, failures: int, select_index: int | None) -> None:
    """List transfers sent by the user."""
    show_list(
        state,
        label="sent transfers",
        pick=lambda services: services.sent_transfers,
        failing_api="transfers",
        failures=failures,
        select_index=select_index,
    )


@click.command()
@_failures_option
@_select_option
@click.pass_obj
def received(state: CliState, failures: int, select_index: int | None) -> None:
    """List transfers received by the user."""
    show_list(
        state,
        label="received transfers",
        pick=lambda services: services.received_transfers,
        failing_api="transfers",
        failures=failures,
        select_index=select_index,
    )
