"""Terminal message helpers for the ITEMFLOW CLI.

Status lines go to stderr so stdout only carries the list rows.
"""

import click


def _glyph(emoji: str, fallback: str) -> str:
    """Return ``emoji`` if stderr can encode it, else the ASCII ``fallback``."""
    encoding = getattr(click.get_text_stream("stderr"), "encoding", None) or "ascii"
    try:
        emoji.encode(encoding)
    except UnicodeEncodeError:
        return fallback
    return emoji


def success(msg: str) -> None:
    """Emit a green, bold success line to **stderr**.

    Example:
        ``✅  Selected Bob``
    """
    click.secho(f"{_glyph('✅', '[OK]')}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line to **stderr**.

    Example:
        ``❌  Could not load friends: FriendsAPI unavailable (attempt 3)``
    """
    click.secho(f"{_glyph('❌', '[X]')}  {msg}", fg="red", bold=True, err=True)
