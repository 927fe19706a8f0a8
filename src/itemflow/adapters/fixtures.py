"""Load demo entities from a JSON fixture file.

The fixture is a JSON object with up to four arrays:

- ``friends``: ``{"id", "name", "phone"}``
- ``cached_friends``: same shape; pre-seeds the friends cache
- ``cards``: ``{"id", "number", "holder"}``
- ``transfers``: ``{"id", "description", "amount", "currency_code", "sender",
  "recipient", "is_sender", "date"}`` with ``amount`` as a string or number and
  ``date`` in ISO 8601.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import TYPE_CHECKING, Any

from itemflow.domain.models import Card, Friend, Transfer

if TYPE_CHECKING:
    from importlib.resources.abc import Traversable


class FixtureError(Exception):
    """Raised when a fixture file cannot be read or is malformed."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"Invalid fixture {source}: {reason}")
        self.source = source
        self.reason = reason


@dataclass(frozen=True)
class Fixture:
    """Entities read from a fixture file."""

    friends: tuple[Friend, ...] = ()
    cached_friends: tuple[Friend, ...] | None = None
    cards: tuple[Card, ...] = ()
    transfers: tuple[Transfer, ...] = ()


def _friend(raw: dict[str, Any]) -> Friend:
    return Friend(id=str(raw["id"]), name=raw["name"], phone=raw["phone"])


def _card(raw: dict[str, Any]) -> Card:
    return Card(id=str(raw["id"]), number=raw["number"], holder=raw["holder"])


def _transfer(raw: dict[str, Any]) -> Transfer:
    return Transfer(
        id=str(raw["id"]),
        description=raw["description"],
        amount=Decimal(str(raw["amount"])),
        currency_code=raw["currency_code"],
        sender=raw["sender"],
        recipient=raw["recipient"],
        is_sender=bool(raw["is_sender"]),
        date=datetime.fromisoformat(raw["date"]),
    )


def parse_fixture(data: dict[str, Any], source: str = "<data>") -> Fixture:
    """Build a `Fixture` from already decoded JSON.

    Args:
        data: The decoded JSON object.
        source: Name used in error messages.

    Returns:
        Fixture: The parsed entities.

    Raises:
        FixtureError: If a record is missing a field or has an invalid value.
    """
    if not isinstance(data, dict):
        raise FixtureError(source, "top-level value must be an object")
    try:
        cached = data.get("cached_friends")
        return Fixture(
            friends=tuple(_friend(raw) for raw in data.get("friends", [])),
            cached_friends=(
                None if cached is None else tuple(_friend(raw) for raw in cached)
            ),
            cards=tuple(_card(raw) for raw in data.get("cards", [])),
            transfers=tuple(_transfer(raw) for raw in data.get("transfers", [])),
        )
    except KeyError as e:
        raise FixtureError(source, f"missing field {e.args[0]!r}") from e
    except (TypeError, ValueError, InvalidOperation) as e:
        raise FixtureError(source, str(e) or type(e).__name__) from e


def load_fixture(path: Path | Traversable) -> Fixture:
    """Read and parse a fixture file.

    Raises:
        FixtureError: If the file cannot be read, is not JSON, or is malformed.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise FixtureError(str(path), e.strerror or str(e)) from e
    except json.JSONDecodeError as e:
        raise FixtureError(str(path), f"not valid JSON ({e.msg})") from e
    return parse_fixture(data, source=str(path))
