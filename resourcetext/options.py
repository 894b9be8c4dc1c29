"""Paged option tables and the actions a key press can stand for."""

from __future__ import annotations

from enum import IntEnum
from typing import Optional, Sequence

from . import ansi
from .keys import Keys

PAGE_SIZE = 10


class InputResult(IntEnum):
    """What a key press means; digits select options on the current page."""

    INVALID = -1
    ZERO = 0
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    EXIT = 10
    TICK = 11
    INFO = 12
    CONFIGURE = 13
    COPY = 14
    PASTE = 15
    UP = 16
    DOWN = 17
    NEW = 18
    REMOVE = 19

    @classmethod
    def from_int(cls, a: int) -> InputResult:
        """Map a key index to its action; raises ValueError outside -1..19."""
        try:
            return cls(a)
        except ValueError:
            raise ValueError(f"{a} doesn't represent a valid input") from None


class OptionTable:
    """A heading, hotkey context labels and a numbered list shown ten at a time."""

    def __init__(
        self, others: str, numbered: Sequence[str], context: Sequence[Optional[str]]
    ) -> None:
        self.others = others
        self.numbered = list(numbered)
        self.context = list(context)
        self._pages = (len(self.numbered) + PAGE_SIZE - 1) // PAGE_SIZE

    def __repr__(self) -> str:
        return (
            f"OptionTable(others={self.others!r}, numbered={self.numbered!r}, "
            f"context={self.context!r})"
        )

    def render(self, page: int, keys: Keys) -> str:
        """The text of one page of the table."""
        reset = ansi.RESET
        lines = [f"{reset}{self.others}{reset}", ""]
        for i, label in enumerate(self.context):
            if keys.is_visible(i) and label is not None:
                lines.append(f"{reset}{keys.key(i)}. {label}{reset}")
        lines.append("")
        count = len(self.numbered)
        start = page * PAGE_SIZE
        end = min(start + PAGE_SIZE, count)
        if self._pages > 1:
            lines.append(
                f"Showing options {start + 1} to {end} of {count} "
                f"(page {page + 1} of {self._pages})"
            )
            if keys.is_visible(InputResult.UP):
                lines.append(f"{keys.key(InputResult.UP)}. Go to the next page")
            if keys.is_visible(InputResult.DOWN):
                lines.append(f"{keys.key(InputResult.DOWN)}. Go to the previous page")
        for i, option in enumerate(self.numbered[start:end]):
            lines.append(f"{reset}{i}. {option}{reset}")
        return "".join(line + "\n" for line in lines)

    def print(self, page: int, keys: Keys) -> None:
        print(self.render(page, keys), end="")

    def pages(self) -> int:
        return self._pages

    def __len__(self) -> int:
        return len(self.numbered)