"""Builders turning domain entities into `ItemViewModel` rows."""

from collections.abc import Callable
from datetime import datetime
from decimal import Decimal

from itemflow.domain.models import Card, Friend, Transfer
from itemflow.interfaces.items_service import DateStyle, ItemViewModel

AMOUNT_SEPARATOR = " • "  # bullet between amount and description


def format_amount(amount: Decimal, currency_code: str) -> str:
    """Format an amount of money, e.g. ``"1,234.50 USD"``."""
    return f"{amount:,.2f} {currency_code}"


def format_date(date: datetime, style: DateStyle) -> str:
    """Format a transfer date in the long or short style.

    Long:  ``"March 5, 2021 at 14:07"``
    Short: ``"03/05/21, 14:07"``
    """
    if style is DateStyle.LONG:
        return f"{date:%B} {date.day}, {date.year} at {date:%H:%M}"
    return f"{date:%m/%d/%y, %H:%M}"


def friend_item(friend: Friend, selection: Callable[[], None]) -> ItemViewModel:
    """Build the row for a friend: name over phone number."""
    return ItemViewModel(title=friend.name, subtitle=friend.phone, select=selection)


def card_item(card: Card, selection: Callable[[], None]) -> ItemViewModel:
    """Build the row for a card: number over holder name."""
    return ItemViewModel(title=card.number, subtitle=card.holder, select=selection)


def transfer_item(
    transfer: Transfer, date_style: DateStyle, selection: Callable[[], None]
) -> ItemViewModel:
    """Build the row for a transfer.

    Sent transfers are shown in the long date style with the recipient,
    received transfers in the short style with the sender.

    Args:
        transfer: The transfer to display.
        date_style: Style of the date in the subtitle; also recorded on the row.
        selection: Action run when the row is selected.

    Returns:
        ItemViewModel: The display record.
    """
    amount = format_amount(transfer.amount, transfer.currency_code)
    date = format_date(transfer.date, date_style)
    if date_style is DateStyle.LONG:
        subtitle = f"Sent to: {transfer.recipient} on {date}"
    else:
        subtitle = f"Received from: {transfer.sender} on {date}"
    return ItemViewModel(
        title=f"{amount}{AMOUNT_SEPARATOR}{transfer.description}",
        subtitle=subtitle,
        select=selection,
        date_style=date_style,
    )
