"""
DSP preset data model.

A preset is an ordered chain of nodes. Each node names a processing-unit
type and carries its raw parameter values by position. A node may hold
fewer values than its unit expects (older preset) or more (newer preset);
consumers fill the gaps with unit defaults via item() / resolve_items().
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence


@dataclass
class DSPNode:
    """One processing unit in a chain."""
    type: str
    enabled: Optional[bool] = None   # None = flag absent or "0"
    items: List[str] = field(default_factory=list)
    name: Optional[str] = None       # display name, only set by add_item

    def item(self, index: int, default: Optional[str] = None) -> Optional[str]:
        """Raw value at position index, or default when the preset has none."""
        if 0 <= index < len(self.items):
            return self.items[index]
        return default

    def resolve_items(self, defaults: Sequence[str]) -> List[str]:
        """
        Values for a unit expecting len(defaults) parameters.

        Stored values win position by position; missing trailing positions
        take the unit default and surplus stored values are dropped.
        """
        return [self.item(i, default) for i, default in enumerate(defaults)]

    def to_dict(self) -> dict:
        d = {
            "type": self.type,
            "items": list(self.items),
        }
        if self.enabled is not None:
            d["enabled"] = self.enabled
        if self.name is not None:
            d["name"] = self.name
        return d

    @classmethod
    def from_dict(cls, data: dict) -> "DSPNode":
        enabled = data.get("enabled")
        return cls(
            type=data["type"],
            enabled=True if enabled else None,
            items=[str(v) for v in data.get("items", [])],
            name=data.get("name"),
        )


@dataclass
class DSPPreset:
    """A named DSP chain."""
    name: str
    nodes: List[DSPNode] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.nodes)

    def types(self) -> List[str]:
        """Unit types in processing order."""
        return [node.type for node in self.nodes]

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "items": [node.to_dict() for node in self.nodes],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "DSPPreset":
        return cls(
            name=data["name"],
            nodes=[DSPNode.from_dict(n) for n in data.get("items", [])],
        )
