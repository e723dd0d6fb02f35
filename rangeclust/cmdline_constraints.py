"""Constraints that restrict which values a command-line argument accepts."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Iterable, TypeVar

T = TypeVar("T")


class Constraint(ABC, Generic[T]):
    """A rule a parsed argument value must satisfy."""

    @abstractmethod
    def description(self) -> str:
        """Return a description of the constraint."""

    @abstractmethod
    def short_id(self) -> str:
        """Return a short label used in usage text."""

    @abstractmethod
    def check(self, value: T) -> bool:
        """Whether ``value`` satisfies the constraint."""


def _format_value(value: object) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


class ValuesConstraint(Constraint[T]):
    """Accepts only values from a fixed list; described as ``a|b|c``."""

    def __init__(self, allowed: Iterable[T]) -> None:
        self._allowed = tuple(allowed)
        self._type_desc = "|".join(_format_value(value) for value in self._allowed)

    def description(self) -> str:
        return self._type_desc

    def short_id(self) -> str:
        return self._type_desc

    def check(self, value: T) -> bool:
        return value in self._allowed