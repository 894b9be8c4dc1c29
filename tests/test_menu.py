import io
import json

import pytest

from resourcetext import constants
from resourcetext.context import Context
from resourcetext.input import Buffer
from resourcetext.keys import Keys
from resourcetext.menu import (
    Config,
    InfoDoc,
    InfoDocs,
    MenuKind,
    MenuResult,
    doc_menu,
    grab,
    grab_menu_res_restricted,
    sample_menu,
    wait_for_user,
)
from resourcetext.options import InputResult, OptionTable

KEY_CHARS = list("0123456789") + ["q", "t", "i", "c", "C", "v", ">", "<", "n", "r"]
DOC_JSON = {
    "contents": {
        "Menu": [
            ["A", "B"],
            [{"Endpoint": ["x"]}, {"Endpoint": ["y", "z"]}],
        ]
    }
}


def make_config():
    rows = [[f"label{j}" for j in range(20)] for _ in range(9)]
    rows[constants.DISPLAY_KEYS] = [f"action{j}" for j in range(20)]
    return Config(Buffer(constants.SEP), Keys(KEY_CHARS, [True] * 20), Context(rows))


def feed(monkeypatch, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))


def table(n=5):
    return OptionTable("head", [f"opt{i}" for i in range(n)], [None] * 20)


def test_grab_maps_key_to_action(monkeypatch):
    feed(monkeypatch, "q\n")
    config = make_config()
    assert grab(table(), 0, config.keys, config.buffer) is InputResult.EXIT


def test_grab_unknown_key_is_invalid(monkeypatch):
    feed(monkeypatch, "z\n")
    config = make_config()
    assert grab(table(), 0, config.keys, config.buffer) is InputResult.INVALID


def test_restricted_digit_enters(monkeypatch):
    feed(monkeypatch, "3\n")
    assert grab_menu_res_restricted(table(), make_config()) == MenuResult.enter(3)


def test_restricted_next_page_offsets_index(monkeypatch):
    feed(monkeypatch, ">2\n")
    assert grab_menu_res_restricted(table(25), make_config()) == MenuResult.enter(12)


def test_restricted_up_on_last_page_stays(monkeypatch):
    feed(monkeypatch, ">2\n")
    assert grab_menu_res_restricted(table(5), make_config()) == MenuResult.enter(2)


def test_restricted_down_on_first_page_stays(monkeypatch):
    feed(monkeypatch, "<4\n")
    assert grab_menu_res_restricted(table(25), make_config()) == MenuResult.enter(4)


@pytest.mark.parametrize("line", ["z/3\n", "t/3\n"])
def test_restricted_invalid_and_tick_are_rejected(monkeypatch, capsys, line):
    feed(monkeypatch, line)
    assert grab_menu_res_restricted(table(), make_config()) == MenuResult.enter(3)
    assert "You entered something invalid!" in capsys.readouterr().out


@pytest.mark.parametrize(
    "ch,kind",
    [
        ("q", MenuKind.EXIT),
        ("C", MenuKind.COPY),
        ("v", MenuKind.PASTE),
        ("n", MenuKind.NEW),
        ("r", MenuKind.REMOVE),
    ],
)
def test_restricted_passthrough(monkeypatch, ch, kind):
    feed(monkeypatch, ch + "\n")
    result = grab_menu_res_restricted(table(), make_config())
    assert result == MenuResult(kind)
    assert result.index is None


def test_restricted_info_opens_docs(monkeypatch, capsys, tmp_path):
    path = tmp_path / "docs.json"
    path.write_text(json.dumps(DOC_JSON), encoding="utf-8")
    config = make_config()
    config.docs_path = path
    feed(monkeypatch, "iq\nq\n")
    assert grab_menu_res_restricted(table(), config) == MenuResult(MenuKind.EXIT)
    assert "Docs master" in capsys.readouterr().out


def test_grab_key_list_and_display():
    config = make_config()
    names = config.grab_key_list()
    assert names == [f"action{j}" for j in range(20)]
    lines = config.display_key_list().splitlines()
    assert lines[0] == "0. action0"
    assert len(lines) == len(names)


def test_grab_key_list_rejects_missing_name():
    config = make_config()
    config.context.context[constants.DISPLAY_KEYS][3] = None
    with pytest.raises(ValueError):
        config.grab_key_list()


def test_configure_key_sets_key_and_visibility(monkeypatch):
    feed(monkeypatch, "kn/\n")
    config = make_config()
    config.configure_key(0)
    assert config.keys.key(0) == "k"
    assert config.keys.is_visible(0) is False


def test_configure_key_conflict_declined(monkeypatch):
    feed(monkeypatch, "q/n\n")
    config = make_config()
    config.configure_key(0)
    assert config.keys.key(0) == "0"
    assert config.keys.is_visible(0) is True


def test_configure_key_checked_resolves_conflicts(monkeypatch):
    feed(monkeypatch, "1/yy/ay/\n")
    config = make_config()
    config.configure_key_checked(0)
    assert config.keys.key(0) == "1"
    assert config.keys.key(1) == "a"
    assert config.keys.find_duplicate(0) is None


def test_configure_keys_then_quit(monkeypatch):
    feed(monkeypatch, "0ky/\nq\n")
    config = make_config()
    config.configure_keys()
    assert config.keys.key(0) == "k"
    assert len(config.buffer) == 0


def test_wait_for_user(monkeypatch, capsys):
    feed(monkeypatch, "abc\n\n")
    config = make_config()
    wait_for_user(config, "press enter")
    assert "press enter" in capsys.readouterr().out
    assert len(config.buffer) == 0


def test_info_docs_parse():
    docs = InfoDocs.from_json(json.dumps(DOC_JSON))
    root = docs.contents
    assert root.is_menu
    assert root.lines == ["A", "B"]
    assert root.children == [InfoDoc(["x"]), InfoDoc(["y", "z"])]
    assert not root.children[1].is_menu


@pytest.mark.parametrize(
    "data",
    ['{"contents": {"Other": []}}', "{}", '{"contents": {"Menu": 5}}', "[1]", "not json"],
)
def test_info_docs_invalid(data):
    with pytest.raises(ValueError):
        InfoDocs.from_json(data)


def test_info_docs_load(tmp_path):
    path = tmp_path / "docs.json"
    path.write_text(json.dumps(DOC_JSON), encoding="utf-8")
    assert InfoDocs.load(path) == InfoDocs.from_json(json.dumps(DOC_JSON))


def test_doc_menu_endpoint(monkeypatch, capsys):
    feed(monkeypatch, "q\n")
    result = doc_menu(InfoDoc(["line1", "line2"]), make_config(), "name")
    assert result == MenuResult(MenuKind.EXIT)
    assert "name\nline1\nline2" in capsys.readouterr().out


def test_doc_menu_enters_child(monkeypatch, capsys):
    feed(monkeypatch, "1q\n")
    doc = InfoDocs.from_json(json.dumps(DOC_JSON)).contents
    assert doc_menu(doc, make_config(), "root") == MenuResult(MenuKind.EXIT)
    assert "B\ny\nz" in capsys.readouterr().out


def test_sample_menu(monkeypatch, capsys):
    feed(monkeypatch, "5\n")
    result = sample_menu(make_config())
    assert result == MenuResult.enter(5)
    assert "of 1000" in capsys.readouterr().out


def test_config_load(tmp_path):
    keys = {"keys": [[f"k{i}", ch, True] for i, ch in enumerate(KEY_CHARS)]}
    context = {"context": [["menu", [["a", "one"], ["b", None]]]]}
    (tmp_path / "keys.json").write_text(json.dumps(keys), encoding="utf-8")
    (tmp_path / "context.json").write_text(json.dumps(context), encoding="utf-8")
    config = Config.load(str(tmp_path) + "/")
    assert config.keys == Keys(KEY_CHARS, [True] * 20)
    assert config.context.grab(0) == ["one", None]
    assert config.buffer.sep == constants.SEP


def test_config_copy_is_independent():
    config = make_config()
    other = config.copy()
    other.keys.set_key(0, "k")
    assert config.keys.key(0) == "0"
    assert other.keys.key(0) == "k"