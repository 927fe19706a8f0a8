"""ITEMFLOW

Composable item-loading strategies for list screens. Small services that each
produce a list of display-ready view models can be wrapped in retry and
fallback combinators, and assembled per user tier so that premium users are
served cached data when the network is unavailable.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
