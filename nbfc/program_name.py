"""Derive a program's display name from the path it was started with."""

from __future__ import annotations

__all__ = ["program_name"]


def program_name(path: str) -> str:
    """Return what follows the last slash that is not the final character."""
    cut = path.rfind("/", 0, len(path) - 1)
    return path[cut + 1:] if cut >= 0 else path