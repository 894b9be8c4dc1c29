"""Name-keyed forms of the resource dictionary and resource amounts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from .resources import ResourceDict, ResourceID, Resources


@dataclass
class ReadableResource:
    """A resource name with its transfer cost."""

    name: str
    transfer_cost: int


def _missing(name: str) -> ValueError:
    return ValueError(f"{name} is not in the resource dictionary!")


@dataclass
class ReadableResourceDict:
    """A resource dictionary that refers to resources by name."""

    resources: list[ReadableResource] = field(default_factory=list)
    growth: dict[str, float] = field(default_factory=dict)
    requirements: dict[str, dict[str, float]] = field(default_factory=dict)
    transfer_resource: Optional[str] = None

    @classmethod
    def from_usable(cls, rss: ResourceDict) -> ReadableResourceDict:
        """Build the name-keyed form of a resource dictionary."""
        return cls(
            resources=[
                ReadableResource(name, cost)
                for name, cost in zip(rss.names, rss.transfer_costs)
            ],
            growth={rss[rid]: value for rid, value in rss.growth.items()},
            requirements={
                rss[rid]: {rss[inner]: value for inner, value in reqs.items()}
                for rid, reqs in rss.requirements.items()
            },
            transfer_resource=(
                None if rss.transfer_resource is None else rss[rss.transfer_resource]
            ),
        )

    def _position(self, name: str) -> ResourceID:
        for i, resource in enumerate(self.resources):
            if resource.name == name:
                return ResourceID(i)
        raise _missing(name)

    def to_usable(self) -> ResourceDict:
        """Resolve names to ids; raises ValueError for an unknown name."""
        growth = {self._position(name): value for name, value in self.growth.items()}
        requirements = {
            self._position(name): {
                self._position(inner): value for inner, value in reqs.items()
            }
            for name, reqs in self.requirements.items()
        }
        transfer = (
            None if self.transfer_resource is None else self._position(self.transfer_resource)
        )
        return ResourceDict(
            names=[r.name for r in self.resources],
            transfer_costs=[r.transfer_cost for r in self.resources],
            growth=growth,
            requirements=requirements,
            transfer_resource=transfer,
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ReadableResourceDict:
        """Build from the decoded JSON object."""
        try:
            return cls(
                resources=[
                    ReadableResource(str(r["name"]), int(r["transfer_cost"]))
                    for r in data["resources"]
                ],
                growth={str(k): float(v) for k, v in data["growth"].items()},
                requirements={
                    str(k): {str(ik): float(iv) for ik, iv in v.items()}
                    for k, v in data["requirements"].items()
                },
                transfer_resource=data.get("transfer_resource"),
            )
        except (KeyError, TypeError, AttributeError) as exc:
            raise ValueError(f"invalid resource dictionary: {exc!r}") from exc

    def to_dict(self) -> dict[str, Any]:
        """The JSON-ready object form."""
        return {
            "resources": [
                {"name": r.name, "transfer_cost": r.transfer_cost} for r in self.resources
            ],
            "growth": dict(self.growth),
            "requirements": {k: dict(v) for k, v in self.requirements.items()},
            "transfer_resource": self.transfer_resource,
        }


@dataclass
class ReadableResources:
    """Resource amounts, caps and surpluses keyed by resource name."""

    current: dict[str, int] = field(default_factory=dict)
    storage: dict[str, int] = field(default_factory=dict)
    surplus: dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ReadableResources:
        """Build from the decoded JSON object."""
        try:
            return cls(
                current={str(k): int(v) for k, v in data["current"].items()},
                storage={str(k): int(v) for k, v in data["storage"].items()},
                surplus={str(k): int(v) for k, v in data["surplus"].items()},
            )
        except (KeyError, TypeError, AttributeError) as exc:
            raise ValueError(f"invalid resources: {exc!r}") from exc

    def convert(self, rss: ResourceDict) -> Resources:
        """Resolve names against ``rss``; raises ValueError for an unknown name."""
        res = Resources(len(rss))
        for values, target in (
            (self.current, res.curr),
            (self.storage, res.cap),
            (self.surplus, res.surplus),
        ):
            for name, amount in values.items():
                rid = rss.find(name)
                if rid is None:
                    raise _missing(name)
                target[rid.id] = amount
        return res