"""Entrypoints (inbound adapters) for ITEMFLOW.

Expose the composed list services to the outside world. The CLI here plays
the part of the presentation layer: it asks the bootstrap for a service,
loads it and prints the rows.

Dependency rule: import `itemflow.bootstrap` for composition; do not reach
into the composition internals.
"""
