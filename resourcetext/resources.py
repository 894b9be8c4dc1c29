"""Resource amounts, storage caps, per-tick surpluses and the resource dictionary."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence

from . import ansi

MAX_AMOUNT = 2**64 - 1
"""Largest storable amount; a cap of this size is shown as ``MAX``."""


@dataclass(frozen=True, order=True)
class ResourceID:
    """Index of a resource in a :class:`ResourceDict`."""

    id: int


def _check_len(target: Sequence, other: Sequence) -> None:
    if len(other) > len(target):
        raise IndexError(
            f"got {len(other)} values for {len(target)} resources"
        )


def _combine(target: list, other: Sequence, op: Callable) -> list:
    _check_len(target, other)
    return [op(t, o) for t, o in zip(target, other)] + target[len(other):]


class Resources:
    """Current amounts, surpluses and caps of every resource."""

    def __init__(self, length: int) -> None:
        self.curr: list[int] = [0] * length
        self.surplus: list[int] = [0] * length
        self.cap: list[int] = [0] * length

    def __repr__(self) -> str:
        return f"Resources(curr={self.curr!r}, surplus={self.surplus!r}, cap={self.cap!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Resources):
            return NotImplemented
        return (self.curr, self.surplus, self.cap) == (other.curr, other.surplus, other.cap)

    def copy(self) -> Resources:
        """Return an independent copy."""
        res = Resources(0)
        res.curr = list(self.curr)
        res.surplus = list(self.surplus)
        res.cap = list(self.cap)
        return res

    def tick(self) -> list[bool]:
        """Clamp to caps and apply surpluses; report which resources ran out."""
        ran_out: list[bool] = []
        new_curr: list[int] = []
        for amount, cap, surplus in zip(self.curr, self.cap, self.surplus):
            amount = min(amount, cap)
            if surplus >= 0 or amount >= -surplus:
                amount += surplus
                ran_out.append(False)
            else:
                ran_out.append(True)
            new_curr.append(amount)
        self.curr = new_curr
        return ran_out

    def spend(self, other: Sequence[int]) -> bool:
        """Spend the given amounts (negatives are gained) if all are affordable."""
        _check_len(self.curr, other)
        if any(c < item for c, item in zip(self.curr, other)):
            return False
        self.curr = _combine(self.curr, other, lambda c, o: c - o)
        return True

    def spend_unsigned(self, other: Sequence[int]) -> bool:
        """Spend the given non-negative amounts if all are affordable."""
        _check_len(self.curr, other)
        if any(c < item for c, item in zip(self.curr, other)):
            return False
        self.curr = _combine(self.curr, other, lambda c, o: c - o)
        return True

    def amt_contained(self, other: Sequence[int]) -> int:
        """How many times ``other`` could be spent; costs of zero or less are ignored."""
        _check_len(self.curr, other)
        return min(
            (c // item for c, item in zip(self.curr, other) if item > 0),
            default=MAX_AMOUNT,
        )

    def force_spend(self, other: Sequence[int]) -> None:
        """Spend without checking; unaffordable resources drop to zero."""
        self.curr = _combine(self.curr, other, lambda c, o: 0 if c < o else c - o)

    def gain(self, other: Sequence[int]) -> bool:
        """Gain the given amounts (negatives are lost) if no amount goes below zero."""
        _check_len(self.curr, other)
        if any(c < -item for c, item in zip(self.curr, other)):
            return False
        self.curr = _combine(self.curr, other, lambda c, o: c + o)
        return True

    def gain_unsigned(self, other: Sequence[int]) -> None:
        """Gain the given non-negative amounts."""
        self.curr = _combine(self.curr, other, lambda c, o: c + o)

    def add_surplus_vec(self, other: Sequence[int]) -> None:
        self.surplus = _combine(self.surplus, other, lambda s, o: s + o)

    def add_storage_vec(self, other: Sequence[int]) -> None:
        self.cap = _combine(self.cap, other, lambda s, o: s + o)

    def add_curr_vec(self, other: Sequence[int]) -> None:
        self.curr = _combine(self.curr, other, lambda s, o: s + o)

    def add(self, other: Resources) -> None:
        """Add another set of amounts, caps and surpluses to this one."""
        self.add_curr_vec(other.curr)
        self.add_storage_vec(other.cap)
        self.add_surplus_vec(other.surplus)

    def rmv_surplus_vec(self, other: Sequence[int]) -> None:
        self.surplus = _combine(self.surplus, other, lambda s, o: s - o)

    def rmv_storage_vec(self, other: Sequence[int]) -> bool:
        """Remove storage if every cap is large enough."""
        if not self.can_rmv_storage_vec(other):
            return False
        self.cap = _combine(self.cap, other, lambda s, o: s - o)
        return True

    def can_rmv_storage_vec(self, other: Sequence[int]) -> bool:
        _check_len(self.cap, other)
        return all(cap >= item for cap, item in zip(self.cap, other))

    def add_res(self, rid: ResourceID, qty: int) -> None:
        self.curr[rid.id] += qty

    def rmv_res(self, rid: ResourceID, qty: int) -> bool:
        """Remove ``qty`` of one resource if there is enough."""
        if self.curr[rid.id] < qty:
            return False
        self.curr[rid.id] -= qty
        return True

    def rmv_res_force(self, rid: ResourceID, qty: int) -> None:
        self.curr[rid.id] = max(self.curr[rid.id] - qty, 0)

    def display(self, rss: ResourceDict, prev: Resources) -> str:
        """Coloured lines for every resource that is or was in play."""
        lines = []
        for rid in map(ResourceID, range(len(rss))):
            if self.should_display(prev, rid):
                lines.append(
                    f"{self.get_color(prev, rid)}{rss[rid]}: "
                    f"{self.curr[rid.id]}/{self.get_cap_fmt(rid)} "
                    f"{self.get_surplus_fmt(prev, rid)}\n"
                )
        return "".join(lines)

    def get_color(self, prev: Resources, rid: ResourceID) -> str:
        now, before = self.curr[rid.id], prev.curr[rid.id]
        if now < before:
            return ansi.RED
        if now == before:
            return ansi.YELLOW
        return ansi.GREEN

    def get_cap_fmt(self, rid: ResourceID) -> str:
        cap = self.cap[rid.id]
        return "MAX" if cap == MAX_AMOUNT else str(cap)

    def get_surplus_fmt(self, prev: Resources, rid: ResourceID) -> str:
        change = self.curr[rid.id] - prev.curr[rid.id]
        if change == 0:
            return ""
        if change > 0:
            return f"(+{change})"
        return f"({change})"

    def should_display(self, prev: Resources, rid: ResourceID) -> bool:
        i = rid.id
        return any((self.curr[i], self.surplus[i], prev.curr[i], prev.surplus[i]))


@dataclass
class ResourceDict:
    """Names and properties of every resource."""

    names: list[str]
    transfer_costs: list[int]
    growth: dict[ResourceID, float] = field(default_factory=dict)
    requirements: dict[ResourceID, dict[ResourceID, float]] = field(default_factory=dict)
    transfer_resource: Optional[ResourceID] = None

    def display_filtered_addon(self, flt: Sequence[bool], extra_text: Sequence[object]) -> str:
        """Numbered lines for the resources selected by ``flt``, each with its extra text."""
        if len(flt) < len(self.names):
            raise IndexError("filter is shorter than the resource list")
        shown = (
            f"{name} ({extra})"
            for name, keep, extra in zip(self.names, flt, extra_text)
            if keep
        )
        return "".join(f"{i}: {text}\n" for i, text in enumerate(shown))

    def __len__(self) -> int:
        return len(self.names)

    def __getitem__(self, rid: ResourceID) -> str:
        return self.names[rid.id]

    def find(self, name: str) -> Optional[ResourceID]:
        """The id of the first resource with this name, or None."""
        try:
            return ResourceID(self.names.index(name))
        except ValueError:
            return None

    def display(self) -> list[str]:
        return list(self.names)


def display_vec_one(rss: ResourceDict, amts: Sequence[int], sep: str) -> str:
    """List the non-zero amounts with their names, each followed by ``sep``."""
    return "".join(
        f"{amount} {rss[ResourceID(i)]}{sep}" for i, amount in enumerate(amts) if amount != 0
    )