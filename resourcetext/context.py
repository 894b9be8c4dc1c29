"""Per-menu lists of context option labels."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional, Union


class Context:
    """For each menu kind, the label of every hotkey action (None hides it)."""

    def __init__(self, context: list[list[Optional[str]]]) -> None:
        self.context = [list(row) for row in context]

    def __repr__(self) -> str:
        return f"Context({self.context!r})"

    @classmethod
    def from_json(cls, data: str) -> Context:
        """Parse ``{"context": [[menu, [[action, label or null], ...]], ...]}``."""
        parsed = json.loads(data)
        try:
            rows: list[list[Optional[str]]] = []
            for _menu, entries in parsed["context"]:
                row: list[Optional[str]] = []
                for _action, label in entries:
                    if label is not None and not isinstance(label, str):
                        raise ValueError(f"expected a string or null, found {label!r}")
                    row.append(label)
                rows.append(row)
        except (KeyError, TypeError) as exc:
            raise ValueError(f"invalid context file: {exc!r}") from exc
        return cls(rows)

    @classmethod
    def load(cls, path: Union[str, Path]) -> Context:
        return cls.from_json(Path(path).read_text(encoding="utf-8"))

    def grab(self, cid: int) -> list[Optional[str]]:
        """A copy of the labels for menu ``cid``."""
        return list(self.context[cid])

    def default(self) -> list[Optional[str]]:
        return self.grab(0)