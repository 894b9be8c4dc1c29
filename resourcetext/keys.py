"""Hotkey bindings for menu actions."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional, Union


class Keys:
    """One hotkey character and a visibility flag per menu action."""

    def __init__(self, keys: list[str], visible: list[bool]) -> None:
        self.keys = list(keys)
        self.visible = list(visible)

    def __repr__(self) -> str:
        return f"Keys(keys={self.keys!r}, visible={self.visible!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Keys):
            return NotImplemented
        return (self.keys, self.visible) == (other.keys, other.visible)

    def copy(self) -> Keys:
        return Keys(self.keys, self.visible)

    @classmethod
    def from_json(cls, data: str) -> Keys:
        """Parse ``{"keys": [[name, char, visible], ...]}``; raises ValueError."""
        parsed = json.loads(data)
        try:
            entries = parsed["keys"]
            keys: list[str] = []
            visible: list[bool] = []
            for _name, ch, shown in entries:
                if not isinstance(ch, str) or len(ch) != 1:
                    raise ValueError(f"expected a single character, found {ch!r}")
                if not isinstance(shown, bool):
                    raise ValueError(f"expected a boolean, found {shown!r}")
                keys.append(ch)
                visible.append(shown)
        except (KeyError, TypeError) as exc:
            raise ValueError(f"invalid key file: {exc!r}") from exc
        return cls(keys, visible)

    @classmethod
    def load(cls, path: Union[str, Path]) -> Keys:
        return cls.from_json(Path(path).read_text(encoding="utf-8"))

    def find(self, ch: str) -> int:
        """Index of the action bound to ``ch``, or -1."""
        try:
            return self.keys.index(ch)
        except ValueError:
            return -1

    def is_visible(self, i: int) -> bool:
        return self.visible[i]

    def key(self, i: int) -> str:
        return self.keys[i]

    def set_key(self, i: int, new: str) -> None:
        self.keys[i] = new

    def set_visible(self, i: int, new: bool) -> None:
        self.visible[i] = new

    def test(self, pos: int, new: str) -> bool:
        """True if binding ``new`` at ``pos`` would clash with no other action."""
        return all(i == pos or key != new for i, key in enumerate(self.keys))

    def find_duplicate(self, excl: int) -> Optional[int]:
        """Another action bound to the same key as ``excl``, if any."""
        target = self.keys[excl]
        return next(
            (i for i, key in enumerate(self.keys) if i != excl and key == target),
            None,
        )


def is_yes(v: str) -> bool:
    return v in ("y", "Y")


def is_no(v: str) -> bool:
    return v in ("n", "N")