"""Groups of mutually exclusive command-line arguments."""

from __future__ import annotations

from typing import Iterable

from rangeclust.cmdline_arg import Arg
from rangeclust.cmdline_errors import CmdLineParseException


def _holds(group: Iterable[Arg], arg: Arg) -> bool:
    return any(member is arg for member in group)


class XorHandler:
    """Keeps lists of arguments of which only one may be given."""

    def __init__(self) -> None:
        self._or_list: list[list[Arg]] = []

    def add(self, ors: Iterable[Arg]) -> None:
        """Add a group of arguments that exclude one another."""
        self._or_list.append(list(ors))

    def check(self, arg: Arg) -> int:
        """Account for ``arg`` having been matched on the command line.

        If ``arg`` belongs to a group, every other member of that group is
        marked as satisfied, and an error is raised if one of them was
        already given. Returns how many required arguments are now covered:
        the group size, 0 for an argument that takes more values, and
        otherwise 1 for a required argument and 0 for an optional one.
        """
        for group in self._or_list:
            if not _holds(group, arg):
                continue
            for member in group:
                if member is not arg and member.is_set():
                    raise CmdLineParseException(
                        "Mutually exclusive argument already set!", str(member)
                    )
            for member in group:
                if member is not arg:
                    member.xor_set()
            return 0 if arg.allow_more() else len(group)
        return 1 if arg.required else 0

    def contains(self, arg: Arg) -> bool:
        """Whether ``arg`` belongs to any exclusive group."""
        return any(_holds(group, arg) for group in self._or_list)

    def xor_list(self) -> list[list[Arg]]:
        """Return the exclusive groups."""
        return self._or_list