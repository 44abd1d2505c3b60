"""Serialise Python values into the indented JSON text written to state files."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

__all__ = ["escape_string", "to_string"]

_INDENT_STEP = 3


def escape_string(text: str) -> str:
    """Escape quotes, backslashes and control characters as ``\\uXXXX``."""
    return "".join(
        f"\\u{ord(c):04X}" if c in '"\\' or c < " " else c for c in text
    )


def to_string(value: Any, indent: int = 0) -> str:
    """Render ``value`` as JSON, each item on its own line indented by ``indent``."""
    out: list[str] = []
    _write(out, value, None, indent)
    return "".join(out)


def _write(out: list[str], value: Any, key: str | None, indent: int) -> None:
    pad = "\n" + " " * indent
    out.append(pad)
    if key is not None:
        out.append(f'"{key}": ')

    if isinstance(value, Mapping):
        out.append("{")
        for i, (child_key, child) in enumerate(value.items()):
            if not isinstance(child_key, str):
                raise TypeError(f"object keys must be str, not {type(child_key).__name__}")
            if i:
                out.append(",")
            _write(out, child, child_key, indent + _INDENT_STEP)
        out.append(pad + "}")
    elif isinstance(value, (list, tuple)):
        out.append("[")
        for i, child in enumerate(value):
            if i:
                out.append(",")
            _write(out, child, None, indent + _INDENT_STEP)
        out.append(pad + "]")
    elif value is None:
        out.append("null")
    elif isinstance(value, bool):
        out.append("true" if value else "false")
    elif isinstance(value, int):
        out.append(str(value))
    elif isinstance(value, float):
        out.append(f"{value:f}")
    elif isinstance(value, str):
        out.append('"' + escape_string(value) + '"')
    else:
        raise TypeError(f"cannot serialise {type(value).__name__}")