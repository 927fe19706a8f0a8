"""Global pytest fixtures for ITEMFLOW."""

pytest_plugins = [
    "tests.fixtures.datagen",
]
