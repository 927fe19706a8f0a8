"""Interfaces (application boundary) for ITEMFLOW.

Defines framework-free contracts shared by the service layer and adapters:
the `ItemsService` loading contract and its view model, the collaborator
capabilities (APIs, caches), and the callback context used for final delivery.

Dependency rule: this package may import `itemflow.domain` only. It may be
imported by `itemflow.service_layer`, `itemflow.adapters`, and
`itemflow.bootstrap`.
"""
