"""Line-based terminal input and a character buffer for menu navigation."""

from __future__ import annotations

import sys
from collections import deque
from typing import Any, Callable, TypeVar

T = TypeVar("T")

_EMPTY_LINE_MARKER = "/"
_REFRESH_LINES = 100


def _parse(parse: Callable[[str], T], text: str) -> T:
    """Apply ``parse``; ``bool`` only accepts the words ``true`` and ``false``."""
    if parse is bool:
        if text == "true":
            return True  # type: ignore[return-value]
        if text == "false":
            return False  # type: ignore[return-value]
        raise ValueError(f"not a boolean: {text!r}")
    return parse(text)


def get_str_raw() -> str:
    """Prompt with ``-->`` and read one line from stdin without its line ending."""
    print("-->", end="", flush=True)
    line = sys.stdin.readline()
    if not line:
        raise EOFError("no more input")
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def refresh() -> None:
    """Push old output off the screen by writing a block of blank lines."""
    out = sys.stdout
    out.write("\n" * _REFRESH_LINES)
    out.flush()


def get_raw(parse: Callable[[str], T], err: str) -> T:
    """Read lines until one parses, printing ``err`` after each failure."""
    while True:
        try:
            return _parse(parse, get_str_raw())
        except ValueError:
            print(err)


def record(to_record: str, w: Callable[[str], Any]) -> Any:
    """Pass ``to_record`` through ``w`` and return its result."""
    return w(to_record)


class Buffer:
    """Characters typed ahead by the user, consumed one at a time or up to a separator."""

    def __init__(self, sep: str) -> None:
        self.sep = sep
        self._chars: deque[str] = deque()

    def __repr__(self) -> str:
        return f"Buffer(sep={self.sep!r}, pending={''.join(self._chars)!r})"

    def __len__(self) -> int:
        return len(self._chars)

    def copy(self) -> Buffer:
        """Return an independent copy."""
        other = Buffer(self.sep)
        other._chars = deque(self._chars)
        return other

    def input(self) -> None:
        """Read a line into the buffer; an empty line counts as a separator."""
        line = get_str_raw() or _EMPTY_LINE_MARKER
        self._chars.extend(line)
        refresh()

    def read(self) -> str:
        """Take the first buffered character, reading input if the buffer is empty."""
        while not self._chars:
            self.input()
        return self._chars.popleft()

    def flush(self) -> str:
        """Remove and return everything up to (not including) the next separator."""
        if not self._chars:
            self.input()
        taken: list[str] = []
        while self._chars:
            ch = self._chars.popleft()
            if ch == self.sep:
                break
            taken.append(ch)
        return "".join(taken)

    def safety(self) -> str:
        """Empty the whole buffer and return what it held."""
        taken = "".join(self._chars)
        self._chars.clear()
        return taken

    def get_flush(self, parse: Callable[[str], T], msg: str, err: str) -> T:
        """Print ``msg`` and parse flushed chunks until one is valid."""
        print(msg)
        while True:
            try:
                return _parse(parse, self.flush())
            except ValueError:
                print(err)

    def get_safety(self, parse: Callable[[str], T], msg: str, err: str) -> T:
        """Print ``msg`` and parse the whole buffer until it is valid."""
        print(msg)
        while True:
            if not self._chars:
                self.input()
            try:
                return _parse(parse, self.safety())
            except ValueError:
                print(err)

    def get_valid_flush(
        self, parse: Callable[[str], T], msg: str, err: str, valid: Callable[[T], bool]
    ) -> T:
        """Like :meth:`get_flush`, but also repeat until ``valid`` accepts the value."""
        while True:
            value = self.get_flush(parse, msg, err)
            if valid(value):
                return value
            print(err)