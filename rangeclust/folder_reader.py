"""Listing files in a folder by name pattern, optionally in numeric order."""

from __future__ import annotations

import logging
import os
import re
from enum import Enum
from pathlib import Path
from typing import Iterator

logger = logging.getLogger(__name__)

_NUMBER = re.compile(r"\d+")


class Order(Enum):
    """How the paths found by a :class:`FolderReader` are ordered."""

    SORTED = "sorted"
    UNDEFINED = "undefined"


def num_from_string(query_str: str) -> int:
    """Return the last run of digits in ``query_str``, or 0 if there is none."""
    numbers = _NUMBER.findall(query_str)
    return int(numbers[-1]) if numbers else 0


def numeric_string_compare(first: str, second: str) -> bool:
    """Whether the last number in ``first`` is smaller than that in ``second``."""
    return num_from_string(first) < num_from_string(second)


class FolderReader:
    """Collects the paths of files in a folder matching a prefix and suffix.

    With :attr:`Order.SORTED` the paths are ordered by the last number in
    each path; otherwise they keep the order the folder listing gives.
    """

    def __init__(
        self,
        folder_path: str | os.PathLike,
        ending_with: str = "",
        starting_with: str = "",
        order: Order = Order.UNDEFINED,
    ) -> None:
        folder = Path(folder_path)
        self._all_paths: list[str] = []
        self._counter = 0
        if not folder.exists():
            raise FileNotFoundError(f"no such folder: {folder}")
        if not folder.is_dir():
            return
        logger.info("Getting file paths from folder: %s", folder)
        with os.scandir(folder) as entries:
            self._all_paths = [
                entry.path
                for entry in entries
                if entry.name.startswith(starting_with) and entry.name.endswith(ending_with)
            ]
        if order is Order.SORTED:
            self._all_paths.sort(key=num_from_string)
        logger.info(
            "There are %d '%s' files in the folder.", len(self._all_paths), ending_with
        )

    @property
    def all_file_paths(self) -> list[str]:
        """Every path found, regardless of how many were already read."""
        return list(self._all_paths)

    def next_file_path(self) -> str | None:
        """Return the next path, or ``None`` once all have been returned."""
        if self._counter < len(self._all_paths):
            path = self._all_paths[self._counter]
            self._counter += 1
            return path
        logger.info("There are no more paths stored.")
        return None

    def __iter__(self) -> Iterator[str]:
        """Yield the paths not yet returned by :meth:`next_file_path`."""
        while (path := self.next_file_path()) is not None:
            yield path

    def __len__(self) -> int:
        return len(self._all_paths)