"""Unit tests for the view model builders."""

from datetime import datetime
from decimal import Decimal

import pytest

from itemflow.interfaces.items_service import DateStyle, ItemViewModel
from itemflow.service_layer.view_models import (
    format_amount,
    format_date,
    transfer_item,
)

# pylint: disable=magic-value-comparison


@pytest.mark.parametrize(
    ("amount", "code", "expected"),
    [
        (Decimal("42.5"), "USD", "42.50 USD"),
        (Decimal("1234.5"), "EUR", "1,234.50 EUR"),
        (Decimal("0"), "GBP", "0.00 GBP"),
    ],
)
def test_format_amount(amount, code, expected):
    """Amounts have two decimals, thousands separators and the currency code."""
    assert format_amount(amount, code) == expected


def test_format_date_long_and_short():
    """Long dates spell the month out; short dates are numeric."""
    date = datetime(2021, 3, 5, 14, 7)
    assert format_date(date, DateStyle.LONG) == "March 5, 2021 at 14:07"
    assert format_date(date, DateStyle.SHORT) == "03/05/21, 14:07"


def test_transfer_title_combines_amount_and_description(make_transfer):
    """The title reads '<amount> • <description>'."""
    item = transfer_item(
        make_transfer(amount=Decimal("10"), currency_code="USD", description="Lunch"),
        DateStyle.LONG,
        lambda: None,
    )
    assert item.title == "10.00 USD • Lunch"


def test_received_transfer_subtitle_names_sender(make_transfer):
    """Received rows name the sender with a short date."""
    item = transfer_item(
        make_transfer(
            is_sender=False, sender="Mary", date=datetime(2021, 3, 1, 9, 15)
        ),
        DateStyle.SHORT,
        lambda: None,
    )
    assert item.subtitle == "Received from: Mary on 03/01/21, 09:15"
    assert item.date_style is DateStyle.SHORT


def test_view_model_is_immutable_and_compares_on_display_fields():
    """Rows are frozen; the selection action is not part of equality."""
    a = ItemViewModel(title="t", subtitle="s", select=lambda: None)
    b = ItemViewModel(title="t", subtitle="s", select=print)

    assert a == b
    with pytest.raises(AttributeError):
        a.title = "other"  # type: ignore[misc]
