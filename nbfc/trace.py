"""Breadcrumb trail used to prefix error messages with where they occurred."""

from __future__ import annotations

__all__ = ["Trace"]


class Trace:
    """A stack of location labels rendered as ``a: b: c``.

    At most ``MAX_DEPTH`` labels are kept (further pushes are ignored) and
    the rendered text is cut at ``MAX_LENGTH`` characters.
    """

    MAX_DEPTH = 32
    MAX_LENGTH = 4095

    def __init__(self) -> None:
        self._text = ""
        self._marks: list[int] = []

    def push(self, text: str) -> None:
        """Append a label to the trail."""
        if len(self._marks) >= self.MAX_DEPTH:
            return
        separator = ": " if self._marks else ""
        self._marks.append(len(self._text))
        self._text = (self._text + separator + text)[: self.MAX_LENGTH]

    def pop(self) -> None:
        """Remove the most recent label; does nothing on an empty trail."""
        if self._marks:
            self._text = self._text[: self._marks.pop()]

    def __str__(self) -> str:
        return self._text