"""Module including the entities listed by the application."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class Friend:
    """A contact the user can send money to."""

    id: str
    name: str
    phone: str


@dataclass(frozen=True)
class Card:
    """A payment card registered by the user."""

    id: str
    number: str
    holder: str


@dataclass(frozen=True)
class Transfer:
    """A money transfer between the user and somebody else.

    Attributes:
        is_sender: True when the user initiated the transfer (a "sent"
            transfer); False when the user is the recipient.
    """

    id: str
    description: str
    amount: Decimal
    currency_code: str
    sender: str
    recipient: str
    is_sender: bool
    date: datetime
