"""Menu input handling, hotkey configuration and the in-game documentation browser."""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Optional, Union

from . import constants
from .context import Context
from .input import Buffer, get_str_raw
from .keys import Keys, is_no, is_yes
from .options import PAGE_SIZE, InputResult, OptionTable

DOCS_PATH = Path("assets") / "config" / "docs.json"


class MenuKind(Enum):
    """The kinds of outcome a menu interaction can have."""

    CONTINUE = "continue"
    EXIT = "exit"
    COPY = "copy"
    PASTE = "paste"
    ENTER = "enter"
    NEW = "new"
    REMOVE = "remove"


@dataclass(frozen=True)
class MenuResult:
    """The outcome of a menu; ``index`` is set only for :attr:`MenuKind.ENTER`."""

    kind: MenuKind
    index: Optional[int] = None

    @classmethod
    def enter(cls, index: int) -> MenuResult:
        return cls(MenuKind.ENTER, index)


@dataclass
class InfoDoc:
    """A documentation page: a menu of titled children, or an endpoint of text lines."""

    lines: list[str]
    children: Optional[list[InfoDoc]] = None

    @property
    def is_menu(self) -> bool:
        return self.children is not None


def _parse_doc(value: Any) -> InfoDoc:
    if not isinstance(value, dict) or len(value) != 1:
        raise ValueError(f"expected a single-key documentation object, found {value!r}")
    ((tag, body),) = value.items()
    try:
        if tag == "Menu":
            names, children = body
            return InfoDoc([str(n) for n in names], [_parse_doc(c) for c in children])
        if tag == "Endpoint":
            return InfoDoc([str(line) for line in body])
    except TypeError as exc:
        raise ValueError(f"invalid documentation entry: {exc!r}") from exc
    raise ValueError(f"unknown documentation kind {tag!r}")


@dataclass
class InfoDocs:
    """The root of the documentation tree."""

    contents: InfoDoc

    @classmethod
    def from_json(cls, data: str) -> InfoDocs:
        """Parse ``{"contents": {"Menu": [...]} | {"Endpoint": [...]}}``; raises ValueError."""
        parsed = json.loads(data)
        if not isinstance(parsed, dict) or "contents" not in parsed:
            raise ValueError("documentation file has no contents")
        return cls(_parse_doc(parsed["contents"]))

    @classmethod
    def load(cls, path: Union[str, Path]) -> InfoDocs:
        return cls.from_json(Path(path).read_text(encoding="utf-8"))


class Config:
    """The input buffer, hotkeys and menu context labels used by every menu."""

    OTHERS = "Select a key to modify it or press q to quit."
    docs_path: Path = DOCS_PATH

    def __init__(self, buffer: Buffer, keys: Keys, context: Context) -> None:
        self.buffer = buffer
        self.keys = keys
        self.context = context

    def __repr__(self) -> str:
        return f"Config(buffer={self.buffer!r}, keys={self.keys!r}, context={self.context!r})"

    def copy(self) -> Config:
        other = Config(self.buffer.copy(), self.keys.copy(), Context(self.context.context))
        other.docs_path = self.docs_path
        return other

    @classmethod
    def load(cls, prefix: Union[str, Path]) -> Config:
        """Load ``keys.json`` and ``context.json`` from the path prefix."""
        prefix = str(prefix)
        keys = Keys.load(prefix + "keys.json")
        context = Context.load(prefix + "context.json")
        return cls(Buffer(constants.SEP), keys, context)

    def configure_keys(self) -> None:
        """Let the user pick hotkeys to rebind until they quit."""
        while True:
            self.buffer.safety()
            table = OptionTable(
                self.OTHERS, self.grab_key_list(), self.context.grab(constants.ONLY_QUIT)
            )
            result = grab_menu_res_restricted(table, self)
            if result.kind is MenuKind.EXIT:
                break
            if result.kind is MenuKind.ENTER:
                self.configure_key_checked(result.index)
            else:
                print("Invalid input!")
                self.buffer.safety()

    def grab_key_list(self) -> list[str]:
        """The display name of every hotkey action."""
        names = self.context.grab(constants.DISPLAY_KEYS)
        if any(name is None for name in names):
            raise ValueError("every hotkey action needs a display name")
        return [str(name) for name in names]

    def display_key_list(self) -> str:
        return "".join(
            f"{self.keys.key(i)}. {line}\n" for i, line in enumerate(self.grab_key_list())
        )

    def configure_key_checked(self, kid: int) -> None:
        """Rebind a key, then rebind whatever now clashes with it."""
        self.configure_key(kid)
        while (dup := self.keys.find_duplicate(kid)) is not None:
            self.configure_key_checked(dup)

    def configure_key(self, kid: int) -> None:
        """Ask for a new hotkey and visibility for action ``kid``."""
        print(f"current key layout: \n{self.display_key_list()}")
        print(
            f"enter the new hotkey for {self.grab_key_list()[kid]} "
            f"(currently {self.keys.key(kid)}): "
        )
        new_key = self.buffer.read()
        if not self.keys.test(kid, new_key):
            print(
                "changing this hotkey will result in conflicts that must be resolved. "
                "are you sure you want to do this? y/n"
            )
            self.buffer.flush()
            if not is_yes(self.buffer.read()):
                return
        print("do you want this key to show up? y/n")
        self.keys.set_visible(kid, not is_no(self.buffer.read()))
        self.keys.set_key(kid, new_key)
        self.buffer.flush()


def grab(options: OptionTable, page: int, keys: Keys, buffer: Buffer) -> InputResult:
    """Show a page of ``options`` and translate the next key press."""
    options.print(page, keys)
    return InputResult.from_int(keys.find(buffer.read()))


_PASSTHROUGH = {
    InputResult.EXIT: MenuKind.EXIT,
    InputResult.COPY: MenuKind.COPY,
    InputResult.PASTE: MenuKind.PASTE,
    InputResult.NEW: MenuKind.NEW,
    InputResult.REMOVE: MenuKind.REMOVE,
}


def grab_menu_res_restricted(options: OptionTable, config: Config) -> MenuResult:
    """Run a menu that cannot advance the game; ticking counts as invalid input."""
    page = 0
    while True:
        result = grab(options, page, config.keys, config.buffer)
        if result in (InputResult.INVALID, InputResult.TICK):
            print("You entered something invalid! ")
            config.buffer.flush()
        elif InputResult.ZERO <= result <= InputResult.NINE:
            return MenuResult.enter(int(result) + page * PAGE_SIZE)
        elif result in _PASSTHROUGH:
            return MenuResult(_PASSTHROUGH[result])
        elif result is InputResult.INFO:
            doc_menu(InfoDocs.load(config.docs_path).contents, config, "Docs master")
        elif result is InputResult.CONFIGURE:
            config.configure_keys()
        elif result is InputResult.UP:
            if page < options.pages() - 1:
                page += 1
        elif result is InputResult.DOWN:
            if page > 0:
                page -= 1


def wait_for_user(config: Config, message: str) -> None:
    """Discard pending input, show ``message`` and wait for a line."""
    config.buffer.flush()
    print(message)
    get_str_raw()


def sample_menu(config: Config) -> MenuResult:
    """Show a thousand numbered options and print the choice made."""
    options = OptionTable("", [str(i) for i in range(1000)], config.context.grab(0))
    result = grab_menu_res_restricted(options, config)
    print(result)
    return result


def doc_menu(doc: InfoDoc, config: Config, name: str) -> MenuResult:
    """Browse a documentation page until the user exits."""
    while True:
        if doc.is_menu:
            options = OptionTable(name, doc.lines, config.context.grab(constants.INFO))
            result = grab_menu_res_restricted(options, config)
            if result.kind is MenuKind.EXIT:
                return result
            if result.kind is MenuKind.ENTER:
                return doc_menu(doc.children[result.index], config, doc.lines[result.index])
        else:
            text = name + "".join("\n" + line for line in doc.lines)
            options = OptionTable(text, [], config.context.grab(constants.INFO))
            result = grab_menu_res_restricted(options, config)
            if result.kind is MenuKind.EXIT:
                return result