"""Rich-text markup used by the quest journal to style step titles."""

from __future__ import annotations


def strike(text: str) -> str:
    """Wrap text in the strike-through style tag."""
    return f"<Strike>{text}</>"


def bold(text: str) -> str:
    """Wrap text in the bold style tag."""
    return f"<Bold>{text}</>"