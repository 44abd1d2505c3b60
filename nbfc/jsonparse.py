"""Parser for the relaxed JSON dialect read from configuration files and sockets.

Differences from strict JSON: commas between items are optional, ``//`` and
``/* */`` comments are allowed, integers follow C literal rules (``0x1F``,
``017``), unknown escapes are kept verbatim and any text after the first
value is ignored. A NUL character ends the text.
"""

from __future__ import annotations

import enum
import math
import re
import sys
from typing import Any

__all__ = ["JsonErrorKind", "JsonError", "parse"]


class JsonErrorKind(enum.Enum):
    """Reasons a text can be rejected."""

    INVALID_UNICODE_ESCAPE = "Invalid unicode escape"
    INVALID_UNICODE_SURROGATE = "Invalid unicode surrogate"
    INVALID_CODEPOINT = "Invalid codepoint"
    MISSING_DOUBLE_QUOTE = "Missing double quote"
    ENDLESS_COMMENT = "Endless comment"
    UNEXPECTED_CHARS = "Unexpected charaters"
    UNEXPECTED_EOT = "Unexpected end of text"
    INVALID_NUMBER = "Invalid number"

    @property
    def message(self) -> str:
        return self.value


class JsonError(ValueError):
    """Raised when a text cannot be parsed; carries the kind and the offset."""

    def __init__(self, kind: JsonErrorKind, position: int) -> None:
        super().__init__(f"{kind.message} (at offset {position})")
        self.kind = kind
        self.position = position


_HEX_DIGITS = "0123456789abcdefABCDEF"
_VALUE_SKIP = " \t\n\r,"
_SIMPLE_ESCAPES = {
    "\\": "\\",
    "/": "/",
    '"': '"',
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_HEX_FLOAT = re.compile(
    r"-?0[xX](?P<mant>[0-9a-fA-F]+\.?[0-9a-fA-F]*)(?:[pP][+-]?[0-9]+)?"
)
_DEC_FLOAT = re.compile(r"-?(?P<mant>[0-9]+\.?[0-9]*)(?:[eE][+-]?[0-9]+)?")

# Marks a closing bracket met where a value was expected.
_CLOSE_BRACKET = object()


def _among(c: str, chars: str) -> bool:
    return c != "" and c in chars


def _is_whitespace(c: str) -> bool:
    return c != "" and ord(c) <= 0x20


def _is_range_error(value: float, mantissa: str) -> bool:
    if math.isinf(value):
        return True
    if value == 0.0:
        return any(d not in "0." for d in mantissa)
    return abs(value) < sys.float_info.min


class _Parser:
    def __init__(self, text: str) -> None:
        self.text = text.split("\0", 1)[0]

    def char(self, i: int) -> str:
        return self.text[i] if i < len(self.text) else ""

    @staticmethod
    def fail(kind: JsonErrorKind, position: int) -> None:
        raise JsonError(kind, position)

    # values -----------------------------------------------------------------

    def value(self, p: int) -> tuple[Any, int]:
        while True:
            c = self.char(p)
            if c == "":
                self.fail(JsonErrorKind.UNEXPECTED_EOT, p)
            if c in _VALUE_SKIP:
                p += 1
            elif c == "{":
                return self.object(p + 1)
            elif c == "[":
                return self.array(p + 1)
            elif c == "]":
                return _CLOSE_BRACKET, p
            elif c == '"':
                return self.string(p + 1)
            elif c in "-0123456789":
                return self.number(p)
            elif c == "/":
                p = self.comment(p)
            else:
                for word, result in (("true", True), ("false", False), ("null", None)):
                    if c == word[0]:
                        if self.text.startswith(word, p):
                            return result, p + len(word)
                        break
                self.fail(JsonErrorKind.UNEXPECTED_CHARS, p)

    def object(self, p: int) -> tuple[dict[str, Any], int]:
        result: dict[str, Any] = {}
        while True:
            key, p = self.key(p)
            if key is None:
                return result, p + 1
            item, p = self.value(p)
            if item is not _CLOSE_BRACKET:
                # The first occurrence of a key wins on lookup.
                result.setdefault(key, item)

    def array(self, p: int) -> tuple[list[Any], int]:
        items: list[Any] = []
        while True:
            item, p = self.value(p)
            if item is not _CLOSE_BRACKET:
                items.append(item)
            if self.char(p) == "]":
                return items, p + 1

    def key(self, p: int) -> tuple[str | None, int]:
        """Read an object key; returns None with the offset of a closing brace."""
        while True:
            c = self.char(p)
            if c == "":
                self.fail(JsonErrorKind.UNEXPECTED_CHARS, p)
            p += 1
            if c == '"':
                key, p = self.string(p)
                while _is_whitespace(self.char(p)):
                    p += 1
                if self.char(p) == ":":
                    return key, p + 1
                self.fail(JsonErrorKind.UNEXPECTED_CHARS, p)
            elif _is_whitespace(c) or c == ",":
                continue
            elif c == "}":
                return None, p - 1
            elif c == "/":
                p = self.comment(p - 1)
            else:
                self.fail(JsonErrorKind.UNEXPECTED_CHARS, p - 1)

    # comments ---------------------------------------------------------------

    def comment(self, p: int) -> int:
        """Skip a comment starting at the slash at offset ``p``."""
        nxt = self.char(p + 1)
        if nxt == "/":
            end = self.text.find("\n", p + 2)
            if end < 0:
                self.fail(JsonErrorKind.ENDLESS_COMMENT, p)
            return end + 1
        if nxt == "*":
            return self.block_comment(p + 2, p)
        self.fail(JsonErrorKind.UNEXPECTED_CHARS, p)
        return p

    def block_comment(self, p: int, start: int) -> int:
        if self.char(p) == "":
            self.fail(JsonErrorKind.ENDLESS_COMMENT, start)
        q = p
        while True:
            q = self.text.find("/", q + 1)
            if q < 0:
                self.fail(JsonErrorKind.ENDLESS_COMMENT, start)
            if self.text[q - 1] == "*":
                return q + 1

    # strings ----------------------------------------------------------------

    def hex4(self, i: int) -> int | None:
        digits = self.text[i:i + 4]
        if len(digits) == 4 and all(d in _HEX_DIGITS for d in digits):
            return int(digits, 16)
        return None

    def string(self, p: int) -> tuple[str, int]:
        start = p
        out: list[str] = []
        while True:
            c = self.char(p)
            if c == "":
                self.fail(JsonErrorKind.MISSING_DOUBLE_QUOTE, start)
            p += 1
            if c == '"':
                return "".join(out), p
            if c != "\\":
                out.append(c)
                continue
            esc = self.char(p)
            if esc in _SIMPLE_ESCAPES:
                out.append(_SIMPLE_ESCAPES[esc])
                p += 1
            elif esc == "u":
                out.append(self.unicode_escape(p))
                p += 5
                if 0xD800 <= ord(out[-1]) < 0xDC00 or len(out[-1]) == 0:
                    pass
                if ord(out[-1]) > 0xFFFF:
                    p += 6
            else:
                # Unknown escapes keep the backslash; the next char is read normally.
                out.append("\\")

    def unicode_escape(self, p: int) -> str:
        """Decode ``\\uXXXX`` (and a following low surrogate); ``p`` is at the ``u``."""
        backslash = p - 1
        codepoint = self.hex4(p + 1)
        if codepoint is None:
            self.fail(JsonErrorKind.INVALID_UNICODE_ESCAPE, backslash)
        if codepoint & 0xFC00 == 0xD800:
            q = p + 6
            low = None
            if self.char(q - 1) == "\\" and self.char(q) == "u":
                low = self.hex4(q + 1)
            if low is None or low & 0xFC00 != 0xDC00:
                self.fail(JsonErrorKind.INVALID_UNICODE_SURROGATE, backslash)
            codepoint = 0x10000 + ((codepoint - 0xD800) << 10) + (low - 0xDC00)
        if 0xD800 <= codepoint < 0xE000:
            self.fail(JsonErrorKind.INVALID_CODEPOINT, backslash)
        return chr(codepoint)

    # numbers ----------------------------------------------------------------

    def integer(self, p: int) -> tuple[int | None, int]:
        """Read an integer the way C reads a literal with base detection."""
        i = p
        negative = self.char(i) == "-"
        if negative:
            i += 1
        if (
            self.char(i) == "0"
            and _among(self.char(i + 1), "xX")
            and _among(self.char(i + 2), _HEX_DIGITS)
        ):
            i += 2
            base, digits = 16, _HEX_DIGITS
        elif self.char(i) == "0":
            base, digits = 8, "01234567"
        else:
            base, digits = 10, "0123456789"
        start = i
        while _among(self.char(i), digits):
            i += 1
        if i == start:
            return None, p
        value = int(self.text[start:i], base)
        return (-value if negative else value), i

    def number(self, p: int) -> tuple[int | float, int]:
        value, end = self.integer(p)
        if value is None or not _INT64_MIN <= value <= _INT64_MAX:
            self.fail(JsonErrorKind.INVALID_NUMBER, p)
        if not _among(self.char(end), ".eE"):
            return value, end

        match = _HEX_FLOAT.match(self.text, p)
        try:
            if match:
                result = float.fromhex(match.group())
            else:
                match = _DEC_FLOAT.match(self.text, p)
                result = float(match.group())
        except (OverflowError, ValueError):
            self.fail(JsonErrorKind.INVALID_NUMBER, p)
        if _is_range_error(result, match.group("mant")):
            self.fail(JsonErrorKind.INVALID_NUMBER, p)
        return result, match.end()


def parse(text: str | bytes) -> Any:
    """Parse ``text`` and return the first value in it as Python objects.

    Objects become dicts, arrays lists, numbers int or float, ``null`` None.
    Raises :class:`JsonError` when the text is malformed.
    """
    if isinstance(text, (bytes, bytearray)):
        text = bytes(text).decode("utf-8")
    parser = _Parser(text)
    value, end = parser.value(0)
    if value is _CLOSE_BRACKET:
        raise JsonError(JsonErrorKind.UNEXPECTED_CHARS, end)
    return value