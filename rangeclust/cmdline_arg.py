"""The common base of command-line arguments, and value extraction."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Callable, ClassVar, MutableSequence, Sequence, TypeVar

from rangeclust.cmdline_errors import ArgParseException, SpecificationException

T = TypeVar("T")

FLAG_START_CHAR = "-"
FLAG_START_STRING = "-"
NAME_START_STRING = "--"
IGNORE_NAME_STRING = "ignore_rest"
# Placeholder left behind when combined switches such as ``-abc`` are consumed.
BLANK_CHAR = "\x07"

_INTEGER = re.compile(r"[+-]?\d+")


class Visitor:
    """Special handling run as soon as an argument is matched."""

    def visit(self) -> None:
        """Do nothing; subclasses override this."""


def _convert(token: str, kind: Callable[[str], T]) -> T:
    if kind is bool:
        if token not in ("0", "1"):
            raise ValueError(token)
        return token == "1"  # type: ignore[return-value]
    if kind is int:
        if not _INTEGER.fullmatch(token):
            raise ValueError(token)
        return int(token)  # type: ignore[return-value]
    return kind(token)


def extract_value(text: str, kind: Callable[[str], T] = str) -> T:
    """Convert ``text`` to a value of ``kind``.

    Strings are taken whole. Other kinds must be given exactly one
    whitespace-separated value; ``bool`` accepts ``0`` and ``1``.
    """
    if kind is str:
        return text  # type: ignore[return-value]
    tokens = text.split()
    if not tokens:
        raise ArgParseException(f"Couldn't read argument value from string '{text}'")
    values = []
    for token in tokens:
        try:
            values.append(_convert(token, kind))
        except (TypeError, ValueError):
            raise ArgParseException(
                f"Couldn't read argument value from string '{text}'"
            ) from None
    if len(values) > 1:
        raise ArgParseException(f"More than one valid value parsed from string '{text}'")
    return values[0]


class Arg(ABC):
    """Data and behaviour shared by every kind of command-line argument.

    ``flag`` is a one-character short form used as ``-f``; it may be empty.
    ``name`` is the long form used as ``--name``.
    """

    ignore_rest: ClassVar[bool] = False
    delimiter: ClassVar[str] = " "

    def __init__(
        self,
        flag: str,
        name: str,
        description: str,
        required: bool,
        value_required: bool,
        visitor: Visitor | None = None,
    ) -> None:
        self._flag = flag
        self._name = name
        self.description = description
        self.required = required
        self.require_label = "required"
        self.value_required = value_required
        self.ignoreable = True
        self._visitor = visitor
        self._already_set = False
        self._xor_set = False
        self._accepts_multiple_values = False

        if len(flag) > 1:
            raise SpecificationException(
                "Argument flag can only be one character long", str(self)
            )
        if name != IGNORE_NAME_STRING and flag in (FLAG_START_STRING, NAME_START_STRING, " "):
            raise SpecificationException(
                f"Argument flag cannot be either '{FLAG_START_STRING}' or "
                f"'{NAME_START_STRING}' or a space.",
                str(self),
            )
        if (
            name.startswith(FLAG_START_STRING)
            or name.startswith(NAME_START_STRING)
            or " " in name
        ):
            raise SpecificationException(
                f"Argument name begin with either '{FLAG_START_STRING}' or "
                f"'{NAME_START_STRING}' or space.",
                str(self),
            )

    @property
    def flag(self) -> str:
        return self._flag

    @property
    def name(self) -> str:
        return self._name

    @abstractmethod
    def process_arg(self, index: int, args: MutableSequence[str]) -> bool:
        """Try to consume ``args[index]``; return whether it was consumed."""

    @classmethod
    def begin_ignoring(cls) -> None:
        """Ignore the remaining ignoreable arguments, as after ``--``."""
        Arg.ignore_rest = True

    @classmethod
    def set_delimiter(cls, delimiter: str) -> None:
        """Set the character separating a flag or name from its value."""
        if len(delimiter) != 1:
            raise ValueError(f"delimiter must be one character, got {delimiter!r}")
        Arg.delimiter = delimiter

    def conflicts_with(self, other: Arg) -> bool:
        """Whether ``other`` uses the same non-empty flag or the same name."""
        return (self._flag != "" and self._flag == other._flag) or self._name == other._name

    def description_text(self) -> str:
        """Return the description, prefixed by the require label if required."""
        prefix = f"({self.require_label})  " if self.required else ""
        return prefix + self.description

    def force_required(self) -> None:
        """Mark the argument as required."""
        self.required = True

    def xor_set(self) -> None:
        """Mark as satisfied through an exclusive group, not the command line."""
        self._already_set = True
        self._xor_set = True

    def is_set(self) -> bool:
        """Whether the argument was matched on the command line."""
        return self._already_set and not self._xor_set

    def arg_matches(self, text: str) -> bool:
        """Whether ``text`` is this argument's ``-flag`` or ``--name``."""
        return (
            self._flag != "" and text == FLAG_START_STRING + self._flag
        ) or text == NAME_START_STRING + self._name

    def short_id(self, value_id: str = "val") -> str:
        """Return the compact form used in the usage line."""
        if self._flag:
            ident = FLAG_START_STRING + self._flag
        else:
            ident = NAME_START_STRING + self._name
        if self.value_required:
            ident += f"{Arg.delimiter}<{value_id}>"
        if not self.required:
            ident = f"[{ident}]"
        return ident

    def long_id(self, value_id: str = "val") -> str:
        """Return the full form listing both flag and name."""
        value = f"{Arg.delimiter}<{value_id}>" if self.value_required else ""
        ident = ""
        if self._flag:
            ident += FLAG_START_STRING + self._flag + value + ",  "
        return ident + NAME_START_STRING + self._name + value

    def trim_flag(self, flag: str) -> tuple[str, str]:
        """Split ``flag`` at the delimiter into ``(flag, value)``.

        Nothing is split off when the delimiter is absent or within the
        first two characters; the value is then empty.
        """
        stop = flag.find(Arg.delimiter)
        if stop > 1:
            return flag[:stop], flag[stop + 1:]
        return flag, ""

    def has_blanks(self, text: str) -> bool:
        """Whether ``text`` holds blank placeholders after its first character."""
        return BLANK_CHAR in text[1:]

    def set_require_label(self, label: str) -> None:
        """Set the label shown in the description of a required argument."""
        self.require_label = label

    def allow_more(self) -> bool:
        """Whether the argument can still take values."""
        return False

    def accepts_multiple_values(self) -> bool:
        """Whether the argument may be given more than once."""
        return self._accepts_multiple_values

    def add_to_list(self, arg_list: list[Arg]) -> None:
        """Insert this argument at the front of ``arg_list``."""
        arg_list.insert(0, self)

    def reset(self) -> None:
        """Forget any match so the argument can parse a new command line."""
        self._xor_set = False
        self._already_set = False

    def _check_with_visitor(self) -> None:
        if self._visitor is not None:
            self._visitor.visit()

    def __str__(self) -> str:
        text = f"{FLAG_START_STRING}{self._flag} " if self._flag else ""
        return text + f"({NAME_START_STRING}{self._name})"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self})"


class OptionalUnlabeledTracker:
    """Ensures no unlabeled argument follows an optional unlabeled one."""

    already_optional: ClassVar[bool] = False

    @classmethod
    def check(cls, required: bool, arg_name: str) -> None:
        """Register an unlabeled argument; raise if one follows an optional one."""
        if OptionalUnlabeledTracker.already_optional:
            raise SpecificationException(
                "You can't specify ANY Unlabeled Arg following an optional Unlabeled Arg",
                arg_name,
            )
        if not required:
            OptionalUnlabeledTracker.already_optional = True

    @classmethod
    def reset(cls) -> None:
        """Forget previously registered optional unlabeled arguments."""
        OptionalUnlabeledTracker.already_optional = False


def args_from(values: Sequence[str]) -> list[str]:
    """Return ``values`` as a mutable list suitable for :meth:`Arg.process_arg`."""
    return list(values)