# resourcetext

`resourcetext` provides the building blocks of a small text game about
producing and spending resources. It has two parts: resource bookkeeping and
a keyboard-driven menu toolkit for the terminal. It uses only the standard
library and needs Python 3.10 or later.

## Modules

- `resourcetext.resources`: `ResourceID`, `Resources`, `ResourceDict` and
  `display_vec_one`.
- `resourcetext.readable_resources`: `ReadableResource`,
  `ReadableResourceDict` and `ReadableResources`, which refer to resources by
  name.
- `resourcetext.input`: `get_str_raw`, `get_raw`, `refresh`, `record` and the
  character `Buffer`.
- `resourcetext.keys`: hotkey bindings (`Keys`, `is_yes`, `is_no`).
- `resourcetext.context`: per-menu context labels (`Context`).
- `resourcetext.options`: `InputResult` and the paged `OptionTable`.
- `resourcetext.menu`: `Config`, `MenuKind`, `MenuResult`, `InfoDoc`,
  `InfoDocs`, `grab`, `grab_menu_res_restricted`, `wait_for_user`,
  `sample_menu` and `doc_menu`.
- `resourcetext.graphics`: `loading_screen`, a text progress bar.
- `resourcetext.ansi` and `resourcetext.constants`: terminal colour codes,
  menu context ids and the input separator `/`.

## Resources

```python
from resourcetext.resources import ResourceDict, ResourceID, Resources, display_vec_one

rss = ResourceDict(["energy", "metal"], [1, 2], {}, {}, None)

stock = Resources(len(rss))
stock.add_storage_vec([100, 50])
stock.add_curr_vec([10, 5])
stock.add_surplus_vec([3, -1])

before = stock.copy()

ran_out = stock.tick()          # one flag per resource: True if it ran out
stock.spend([2, 1])             # False, and nothing changes, if unaffordable
print(stock.display(rss, before))
print(display_vec_one(rss, [45, 0], ", "))   # "45 energy, "
print(rss.find("metal"), rss[ResourceID(0)])
```

Each tick first trims every resource to its cap, then applies its surplus. A
negative surplus that cannot be paid leaves the amount unchanged and is
reported as having run out. `display` colours each line red, yellow or green
depending on whether the amount fell, stayed or rose since `prev`, and shows a
cap of `2**64 - 1` as `MAX`.

## Readable resource data

`ReadableResourceDict.from_dict` builds a dictionary from a plain mapping such
as one decoded from JSON:

```json
{
  "resources": [{"name": "energy", "transfer_cost": 1}],
  "growth": {"energy": 0.5},
  "requirements": {},
  "transfer_resource": "energy"
}
```

`to_dict` gives that form back, `to_usable` turns it into a `ResourceDict`
and `from_usable` goes the other way. `ReadableResources.from_dict` reads
`"current"`, `"storage"` and `"surplus"` mappings, and
`ReadableResources.convert(rss)` builds a `Resources` from them. Malformed
data and names the dictionary does not know raise `ValueError`.

## Menus

Menus are configured by two JSON files:

- `keys.json`: `{"keys": [[name, character, visible], ...]}`, one entry per
  action in the order of `InputResult` (digits 0 to 9, then exit, tick, info,
  configure, copy, paste, up, down, new, remove).
- `context.json`: `{"context": [[menu, [[action, label], ...]], ...]}`, where a
  label of `null` hides that hotkey in the menu. The menus are indexed by the
  ids in `resourcetext.constants`.

`Config.load(prefix)` reads both files from `prefix + "keys.json"` and
`prefix + "context.json"`.

```python
from resourcetext.menu import Config, MenuKind, grab_menu_res_restricted
from resourcetext.options import OptionTable

config = Config.load("assets/config/")
table = OptionTable("Pick a number", [str(n) for n in range(25)], config.context.grab(0))
result = grab_menu_res_restricted(table, config)
if result.kind is MenuKind.ENTER:
    print("chose", result.index)
```

Options are shown ten to a page and chosen with the digit keys; the up and
down hotkeys change page, the exit, copy, paste, new and remove hotkeys end
the menu with the matching `MenuKind`, the info hotkey opens the
documentation read from `Config.docs_path` (`assets/config/docs.json` by
default) and the configure hotkey runs `Config.configure_keys()`, which lets
the player rebind hotkeys and resolves any clashes it creates. The tick
hotkey and unbound keys count as invalid input.

Input is typed ahead into a `Buffer`: each key press takes one character, and
an empty line counts as the separator `/`. `get_raw` and the `Buffer.get_*`
methods take a parse function; with `bool` only the words `true` and `false`
are accepted.

The documentation file has the form
`{"contents": {"Menu": [[titles...], [children...]]}}`, where each child is
again a `{"Menu": ...}` or an `{"Endpoint": [lines...]}`; `doc_menu` browses
it.

## What this package does not do

There is no game here to play and no command to start one: the package has no
star systems, objects, components, recipes or instruction queues, no game
loop that ticks them, and no saving or loading of games. Only the menus that
need no game state — the plain option menu, hotkey configuration and the
documentation browser — are provided.