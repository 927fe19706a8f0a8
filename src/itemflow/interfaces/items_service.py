"""The list-loading contract and the view model it produces.

Every loading strategy, from a single source adapter to a deeply nested
retry/fallback chain, implements `ItemsService` and exposes exactly one
operation, `load_items()`. Keeping that signature uniform is what allows
services to be nested without limit.
"""

import abc
from collections.abc import Callable
from concurrent.futures import Future
from dataclasses import dataclass, field
from enum import Enum

# pylint: disable=too-few-public-methods


class DateStyle(Enum):
    """Length of the date shown on a transfer item."""

    LONG = "long"
    SHORT = "short"


@dataclass(frozen=True)
class ItemViewModel:
    """Immutable display record for one row of a list.

    Attributes:
        title: Primary line of text.
        subtitle: Secondary line of text.
        select: Zero-argument action reporting the selection of the entity
            this item was built from. Not part of equality.
        date_style: Date style used to render the subtitle, for items that
            show a date; None otherwise.
    """

    title: str
    subtitle: str
    select: Callable[[], None] = field(compare=False, repr=False)
    date_style: DateStyle | None = None


class ItemsService(abc.ABC):
    """Contract for anything that can load a list of items."""

    @abc.abstractmethod
    def load_items(self) -> Future[list[ItemViewModel]]:
        """Start loading the items.

        Returns:
            A future resolved exactly once: with the ordered list of items on
            success, or with the exception reported by the underlying source
            on failure. Side effects of the load (e.g. cache writes) are
            complete by the time it resolves.
        """
