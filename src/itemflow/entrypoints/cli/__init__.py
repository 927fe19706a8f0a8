"""Command-line interface for ITEMFLOW."""
