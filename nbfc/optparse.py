"""Command line option parser with exclusive groups and positional options.

Options are described by :class:`Option` records whose ``optstring`` lists
names separated by any of ``" |,"``: ``-x`` is a short option, ``--name`` a
long option and a bare word a positional. The parser is driven by repeated
calls to :meth:`Parser.get_opt`, which returns the ``value`` of each option
met on the command line.
"""

from __future__ import annotations

import enum
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Union

__all__ = [
    "NARGS_MASK",
    "REQUIRED_OPTION",
    "OPTIONAL_ARGUMENT",
    "ANY_ARGUMENTS",
    "SOME_ARGUMENTS",
    "NO_SEPARATE_OPTIONALS",
    "NO_OPTIONS_AS_ARGUMENTS",
    "NO_SHORT_LONG_OPTS",
    "NO_ABBREVIATED_OPTS",
    "OPTIONS_PYTHON",
    "OPTIONS_GETOPT",
    "OPTIONS_MAX",
    "ParseErrorKind",
    "Option",
    "ExclusiveGroup",
    "Parser",
    "str_error",
]

# Flag masks
NARGS_MASK = 0x3F
REQUIRED_OPTION = 0x40

# Number of arguments besides 0 and 1
OPTIONAL_ARGUMENT = ord("?")
ANY_ARGUMENTS = ord("*")
SOME_ARGUMENTS = ord("+")

# Behaviour
NO_SEPARATE_OPTIONALS = 0x01000000
NO_OPTIONS_AS_ARGUMENTS = 0x02000000
NO_SHORT_LONG_OPTS = 0x04000000
NO_ABBREVIATED_OPTS = 0x08000000

OPTIONS_PYTHON = NO_OPTIONS_AS_ARGUMENTS
OPTIONS_GETOPT = NO_SEPARATE_OPTIONALS

OPTIONS_MAX = 256
_POSITIONALS_MAX = 32
_DELIMITERS = " |,"


class ParseErrorKind(enum.IntEnum):
    """The last error met by a parser."""

    SUCCESS = 0
    MUTUALLY_EXCLUSIVE = 1
    UNKNOWN_OPTION = 2
    ARGUMENT_REQUIRED = 3
    TOO_MANY_ARGUMENTS = 4
    UNKNOWN = 5

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    ParseErrorKind.SUCCESS: "Success",
    ParseErrorKind.MUTUALLY_EXCLUSIVE: "Mutual exclusion conflict",
    ParseErrorKind.UNKNOWN_OPTION: "Unknown option",
    ParseErrorKind.ARGUMENT_REQUIRED: "Argument required",
    ParseErrorKind.TOO_MANY_ARGUMENTS: "Too many arguments",
    ParseErrorKind.UNKNOWN: "Unknown error",
}


def str_error(kind: int) -> str:
    """Return the message for an error kind; unknown kinds give "Unknown error"."""
    try:
        return ParseErrorKind(kind).message
    except ValueError:
        return ParseErrorKind.UNKNOWN.message


@dataclass(frozen=True)
class Option:
    """An option: its names, the value returned for it and its flags.

    ``flags`` holds the number of arguments (0, 1, ``OPTIONAL_ARGUMENT``,
    ``ANY_ARGUMENTS`` or ``SOME_ARGUMENTS``), optionally or-ed with
    ``REQUIRED_OPTION``.
    """

    optstring: str
    value: Any
    flags: int = 0


@dataclass(frozen=True)
class ExclusiveGroup:
    """Options of which at most one may be given on a command line."""

    name: str
    options: Sequence[Any] = field(default_factory=tuple)
    flags: int = 0


OptionList = Sequence[Union[Option, ExclusiveGroup, "OptionList"]]


class _State(enum.Enum):
    UNINITIALIZED = "uninitialized"
    POSITIONAL = "positional"
    SHORT_OPT = "short_opt"
    LONG_OPT = "long_opt"
    SHORT_PARAMETER = "short_parameter"
    LONG_PARAMETER = "long_parameter"
    OPTIONS_END = "options_end"
    NEXT_WORD = "next_word"
    EOF = "EOF"


class _Op(enum.Enum):
    IS_EOF = "op_is_eof"
    GETOPTARG = "op_getoptarg"
    GETARG = "op_getarg"
    NEXT = "op_next_state"
    REWIND_SHORT_OPT = "op_rewind_short_opt"


@dataclass
class _Entry:
    option: Option
    group: int
    long_names: list[str] = field(default_factory=list)
    count: int = 0


def _argument_required(flags: int) -> bool:
    return (flags & NARGS_MASK) not in (OPTIONAL_ARGUMENT, ANY_ARGUMENTS, 0)


def _is_negative_num(word: str) -> bool:
    if not word.startswith("-"):
        return False
    digits = 0
    for c in word[1:]:
        if "0" <= c <= "9":
            digits += 1
        elif c not in ".,":
            return digits > 0
    return True


def _tokens(optstring: str):
    """Yield ``(dashes, name)`` for each name in an option string."""
    i, n = 0, len(optstring)
    while i < n:
        dashes = (optstring[i:i + 1] == "-") + (optstring[i + 1:i + 2] == "-")
        i += dashes
        start = i
        while i < n and optstring[i] not in _DELIMITERS:
            i += 1
        name = optstring[start:i]
        while i < n and optstring[i] in _DELIMITERS:
            i += 1
        yield dashes, name


def _next_state(word: str) -> _State:
    if word.startswith("-"):
        if word[1:2] == "-":
            return _State.LONG_OPT if word[2:] else _State.OPTIONS_END
        return _State.SHORT_OPT if word[1:] else _State.POSITIONAL
    return _State.POSITIONAL


class Parser:
    """Parses ``argv`` (program name first) against a list of options.

    Errors raise :class:`ValueError`; ``error``, ``optopt`` and ``optarg``
    then describe what went wrong.
    """

    def __init__(self, argv: Sequence[str], options: OptionList, flags: int = 0) -> None:
        self.argv = list(argv)
        self.flags = flags
        self.argi = 0
        self.optopt: str | None = None
        self.optarg: str | None = None
        self.error = ParseErrorKind.SUCCESS
        self._state = _State.UNINITIALIZED
        self._arg = ""
        self._arg_l = -1
        self._positional_count = 0
        self._end_of_options = False
        self._groups_count = 0
        self._groups = 0
        self._entries: list[_Entry] = []
        self._short: dict[str, int] = {}
        self._positionals: list[int] = []
        self.set_options(options, True)

    # option tables ------------------------------------------------------------

    def set_options(self, options: OptionList, reset: bool = False) -> None:
        """Replace the known options.

        Usage counts of options at positions that existed before are kept.
        With ``reset`` the record of used exclusive groups is cleared.
        """
        if reset:
            self._groups_count = 0
            self._groups = 0
        old = self._entries
        self._entries = []
        self._short = {}
        self._positionals = []
        self._collect(options, False)
        for index, entry in enumerate(self._entries[: len(old)]):
            entry.count = old[index].count

    def _collect(self, options: OptionList, in_group: bool) -> None:
        if isinstance(options, (str, bytes)):
            raise TypeError("options must be a sequence of Option records")
        for item in options:
            if isinstance(item, ExclusiveGroup):
                self._groups_count += 1
                self._collect(item.options, True)
            elif isinstance(item, Option):
                self._add(item, self._groups_count if in_group else 0)
            elif isinstance(item, (list, tuple)):
                self._collect(item, in_group)
            else:
                raise TypeError(f"not an option: {item!r}")

    def _add(self, option: Option, group: int) -> None:
        if len(self._entries) >= OPTIONS_MAX:
            raise ValueError(f"at most {OPTIONS_MAX} options are supported")
        index = len(self._entries)
        entry = _Entry(option, group)
        self._entries.append(entry)
        for dashes, name in _tokens(option.optstring):
            if dashes == 0:
                self._positionals.append(index)
            elif dashes == 1:
                self._short[name[:1]] = index
            else:
                entry.long_names.append(name)

    # state machine ------------------------------------------------------------

    def _state_ctl(self, op: _Op, flags: int) -> bool:
        while True:
            state = self._state
            if state is _State.UNINITIALIZED:
                self.argi = 0
                self.optopt = None
                self.optarg = None
                self.error = ParseErrorKind.SUCCESS
                self._arg = ""
                self._arg_l = -1
                self._positional_count = 0
                self._end_of_options = False
                self._state = _State.NEXT_WORD
                continue
            if state is _State.NEXT_WORD:
                self._advance()
                continue
            return self._apply(state, op, flags)

    def _advance(self) -> None:
        if self.argi + 1 >= len(self.argv):
            self._state = _State.EOF
            return
        self.argi += 1
        word = self.argv[self.argi]
        self._arg = word
        self._arg_l = -1
        if self._end_of_options:
            self._state = _State.POSITIONAL
            return
        self._state = _next_state(word)
        if self._state is _State.SHORT_OPT:
            self._arg = word[1:]
            self._arg_l = 1
        elif self._state is _State.LONG_OPT:
            self._arg = word[2:]
            eq = self._arg.find("=")
            self._arg_l = eq if eq >= 0 else len(self._arg)
        elif self._state is _State.OPTIONS_END:
            self._end_of_options = True

    def _apply(self, state: _State, op: _Op, flags: int) -> bool:
        required = _argument_required(flags)

        if state is _State.SHORT_OPT:
            if op is _Op.GETOPTARG:
                if flags & NO_SEPARATE_OPTIONALS:
                    return not required
                if flags & NO_OPTIONS_AS_ARGUMENTS and not _is_negative_num(
                    self.argv[self.argi]
                ):
                    return not required
                self.optarg = self.argv[self.argi]
                self._state = _State.NEXT_WORD
                return True
            if op is _Op.NEXT:
                if len(self._arg) > 1:
                    self._arg = self._arg[1:]
                    self._state = _State.SHORT_PARAMETER
                else:
                    self._state = _State.NEXT_WORD
                return True
            return False

        if state is _State.LONG_OPT:
            if op is _Op.GETOPTARG:
                if flags & (NO_OPTIONS_AS_ARGUMENTS | NO_SEPARATE_OPTIONALS):
                    return not required
                self.optarg = self.argv[self.argi]
                self._state = _State.NEXT_WORD
                return True
            if op is _Op.NEXT:
                if self._arg_l < len(self._arg):
                    self._arg = self._arg[self._arg_l + 1:]
                    self._arg_l = -1
                    self._state = _State.LONG_PARAMETER
                else:
                    self._state = _State.NEXT_WORD
                return True
            return False

        if state in (_State.SHORT_PARAMETER, _State.LONG_PARAMETER):
            if op is _Op.GETOPTARG:
                self.optarg = self._arg
            if op in (_Op.GETOPTARG, _Op.NEXT):
                self._state = _State.NEXT_WORD
                return True
            if op is _Op.REWIND_SHORT_OPT and state is _State.SHORT_PARAMETER:
                self._state = _State.SHORT_OPT
                return True
            return False

        if state is _State.OPTIONS_END:
            if op is _Op.NEXT:
                self._state = _State.NEXT_WORD
                return True
            return False

        if state is _State.POSITIONAL:
            if op is _Op.GETOPTARG and flags & NO_SEPARATE_OPTIONALS and required:
                return False
            if op in (_Op.GETOPTARG, _Op.GETARG):
                self.optarg = self._arg
            if op in (_Op.GETOPTARG, _Op.GETARG, _Op.NEXT):
                self._state = _State.NEXT_WORD
                return True
            return False

        # EOF
        if op in (_Op.GETARG, _Op.GETOPTARG):
            return not required
        return op is _Op.IS_EOF

    # matching ----------------------------------------------------------------

    def _match(self) -> _Entry | None:
        self._state_ctl(_Op.IS_EOF, 0)
        if self._state is _State.POSITIONAL:
            count = self._positional_count
            if count < _POSITIONALS_MAX and count < len(self._positionals):
                return self._entries[self._positionals[count]]
        elif self._state is _State.SHORT_OPT:
            index = self._short.get(self._arg[:1])
            if index is not None:
                return self._entries[index]
        elif self._state is _State.LONG_OPT:
            name = self._arg[: self._arg_l]
            for entry in self._entries:
                if name in entry.long_names:
                    return entry
        return None

    def _fail(self, kind: ParseErrorKind) -> None:
        self.error = kind
        raise ValueError(self._describe())

    def _describe(self) -> str:
        parts = [p for p in (self.optopt, self.error.message, self.optarg) if p]
        return ": ".join(parts)

    # public interface --------------------------------------------------------

    def get_opt(self) -> Any:
        """Return the value of the next option, or None when all are read."""
        while True:
            self.optarg = None
            entry = self._match()
            if entry is not None:
                break
            if self._state is _State.OPTIONS_END:
                self._state_ctl(_Op.NEXT, 0)
                continue
            if self._state is _State.EOF:
                return None
            self.optopt = self.argv[self.argi]
            self._fail(ParseErrorKind.UNKNOWN_OPTION)

        option = entry.option
        self.optopt = option.optstring
        bit = 1 << (entry.group - 1) if entry.group else 0

        if bit and self._groups & bit and not entry.count:
            self._fail(ParseErrorKind.MUTUALLY_EXCLUSIVE)

        entry.count += 1
        self._groups |= bit

        if self._state is _State.POSITIONAL:
            if not self._state_ctl(_Op.GETOPTARG, self.flags | option.flags):
                self._fail(ParseErrorKind.ARGUMENT_REQUIRED)
            self._positional_count += 1
            return option.value

        self._state_ctl(_Op.NEXT, 0)

        if option.flags & NARGS_MASK == 0:
            if self._state is _State.LONG_PARAMETER:
                self._fail(ParseErrorKind.TOO_MANY_ARGUMENTS)
            elif self._state is _State.SHORT_PARAMETER:
                self._state_ctl(_Op.REWIND_SHORT_OPT, 0)
        elif not self._state_ctl(_Op.GETOPTARG, self.flags | option.flags):
            self._fail(ParseErrorKind.ARGUMENT_REQUIRED)

        return option.value

    def get_optarg(self, flags: int = 0) -> str | None:
        """Read an option argument; None if it is optional and absent."""
        self.optarg = None
        if not self._state_ctl(_Op.GETOPTARG, self.flags | flags):
            self._fail(ParseErrorKind.ARGUMENT_REQUIRED)
        return self.optarg

    def get_arg(self, flags: int = 0) -> str | None:
        """Read the next positional argument; None if optional and absent."""
        self.optarg = None
        if not self._state_ctl(_Op.GETARG, self.flags | flags):
            self._fail(ParseErrorKind.ARGUMENT_REQUIRED)
        return self.optarg

    def check_required(self) -> None:
        """Raise ValueError if a required option was not given."""
        for entry in self._entries:
            if entry.option.flags & REQUIRED_OPTION and not entry.count:
                self.optopt = entry.option.optstring
                self.optarg = None
                self._fail(ParseErrorKind.ARGUMENT_REQUIRED)

    def at_end(self) -> bool:
        """Return True when every word of the command line has been read."""
        return self._state_ctl(_Op.IS_EOF, 0)

    def explain_error(self) -> str:
        """Write the last error to standard error and return that line."""
        program = self.argv[0] if self.argv else ""
        line = f"{program}: {self._describe()}"
        print(line, file=sys.stderr)
        return line