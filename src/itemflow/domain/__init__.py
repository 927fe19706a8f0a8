"""Domain layer for ITEMFLOW.

Holds the records obtained from the outside world (friends, cards, transfers).
The loading layer only reads these; nothing here knows how they are fetched,
cached or displayed.

Dependency rule: this package must not import any other `itemflow.*` module.
"""

from .models import Card, Friend, Transfer

__all__ = ["Card", "Friend", "Transfer"]
