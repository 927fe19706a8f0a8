"""Adapters (infrastructure) for ITEMFLOW.

Concrete implementations of the collaborator interfaces: in-memory APIs and
caches (for tests, development and the demo CLI), the null cache, callback
contexts, and the JSON fixture loader.

Dependency rule: may import `itemflow.domain` and `itemflow.interfaces`; inner
layers must not import this package.
"""
