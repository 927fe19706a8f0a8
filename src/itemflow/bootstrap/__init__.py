"""Bootstrap (composition root) for ITEMFLOW.

Assembles the loading strategy for each list: wires source adapters to the
collaborators they wrap and applies the tier policy (retry, fallback to the
cache, or caching switched off with the null cache).

Import rules:
- Entry points import *this* package to obtain composed services.
- This package may import: `itemflow.adapters`, `itemflow.service_layer`,
  `itemflow.interfaces`, `itemflow.domain`, and `itemflow.config`.
- Inner layers must not import `itemflow.bootstrap`.

Public surface:
- Re-export composition factories from this module; no loading logic lives here.
"""

from .bootstrap import (
    Collaborators,
    ListServices,
    SelectionSinks,
    bootstrap,
    build_cards_service,
    build_friends_service,
    build_received_transfers_service,
    build_sent_transfers_service,
)

__all__ = [
    "Collaborators",
    "ListServices",
    "SelectionSinks",
    "bootstrap",
    "build_cards_service",
    "build_friends_service",
    "build_received_transfers_service",
    "build_sent_transfers_service",
]
