# src/dcsim_core/data_structures.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Optional, Tuple

from .components.base_enums import ComponentKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Component:
    """
    One electrical device or terminal point on the board.

    `type_tag` is the editor's free-form type string; `kind` is the closed kind the
    engine models it as. Placement (x, y) is carried through for the renderer and is
    never read by the analysis.
    """
    id: str
    kind: ComponentKind
    label: str = ""
    value: Optional[str] = None
    x: float = 0.0
    y: float = 0.0
    type_tag: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Component:
        """Builds a Component from the application's node JSON shape."""
        tag = str(data.get("type", ""))
        value = data.get("value")
        return cls(
            id=str(data["id"]),
            kind=ComponentKind.from_tag(tag),
            label=str(data.get("label", "")),
            value=None if value is None else str(value),
            x=float(data.get("x", 0.0)),
            y=float(data.get("y", 0.0)),
            type_tag=tag,
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": self.id,
            "type": self.type_tag or self.kind.value,
            "label": self.label,
            "x": self.x,
            "y": self.y,
        }
        if self.value is not None:
            data["value"] = self.value
        return data


@dataclass(frozen=True)
class Wire:
    """
    An undirected connection between two components. The endpoint order still
    matters to the pin heuristic: `source_id` exposes its outgoing pin, `target_id`
    its incoming pin.
    """
    id: str
    source_id: str
    target_id: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Wire:
        return cls(id=str(data["id"]), source_id=str(data["sourceId"]), target_id=str(data["targetId"]))

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "sourceId": self.source_id, "targetId": self.target_id}


@dataclass(frozen=True)
class CircuitData:
    """
    A complete, immutable snapshot of the graph handed to the analysis engine.
    Duplicate wires are kept as given.
    """
    components: Tuple[Component, ...] = field(default_factory=tuple)
    wires: Tuple[Wire, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Accept any iterable but store tuples so the snapshot stays immutable.
        object.__setattr__(self, "components", tuple(self.components))
        object.__setattr__(self, "wires", tuple(self.wires))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> CircuitData:
        """Builds a snapshot from `{nodes: [...], connections: [...]}` without validation."""
        return cls(
            components=tuple(Component.from_dict(n) for n in data.get("nodes", [])),
            wires=tuple(Wire.from_dict(c) for c in data.get("connections", [])),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nodes": [c.to_dict() for c in self.components],
            "connections": [w.to_dict() for w in self.wires],
        }

    def get_component(self, component_id: str) -> Optional[Component]:
        for component in self.components:
            if component.id == component_id:
                return component
        return None

    def iter_kind(self, kind: ComponentKind) -> Iterator[Component]:
        return (c for c in self.components if c.kind is kind)
