# src/dcsim_core/analysis/nets.py
"""
Infers two pins per component from the wire graph and merges electrically identical
pins into nets.

The editor's wires name components, not terminals, so the pin each wire attaches to
is chosen by a fixed directional rule:

- a voltage source always connects through p1 (its positive terminal);
- a ground connects through p1, which is shorted to its p2 anyway;
- any other component exposes p2 when it is the wire's source endpoint and p1 when
  it is the wire's target endpoint.

Nothing ever wires to a source's negative terminal, so every source's p2 is tied to
the ground reference. When the circuit has no ground component, the first source's
p2 becomes the reference.
"""
import itertools
import logging
from typing import Dict, List, Optional, Tuple

from networkx.utils import UnionFind

from ..components.base_enums import ComponentKind
from ..data_structures import CircuitData, Component, Wire
from .results import NetResolution, PinPair

logger = logging.getLogger(__name__)


class _PinArena:
    """
    Function-scoped union-find over synthetic integer pin ids, two per component.
    A fresh arena is created for every resolution, so calls share no state.
    """
    def __init__(self):
        self._sets = UnionFind()
        self._ids = itertools.count()

    def allocate(self) -> int:
        pin_id = next(self._ids)
        self._sets[pin_id]  # registers the pin as its own singleton set
        return pin_id

    def union(self, a: int, b: int):
        self._sets.union(a, b)

    def find(self, pin_id: int) -> int:
        return self._sets[pin_id]

    def groups(self) -> Dict[int, Tuple[int, ...]]:
        return {self.find(next(iter(s))): tuple(sorted(s)) for s in self._sets.to_sets()}


def _wire_pins(
    wire: Wire, by_id: Dict[str, Component], raw_pins: Dict[str, Tuple[int, int]]
) -> Optional[Tuple[int, int]]:
    """Selects the pin of each endpoint that a wire joins, or None for a dangling wire."""
    source, target = by_id.get(wire.source_id), by_id.get(wire.target_id)
    if source is None or target is None:
        missing = wire.source_id if source is None else wire.target_id
        logger.warning(f"Wire '{wire.id}' references unknown component '{missing}'; ignoring it.")
        return None

    src_p1, src_p2 = raw_pins[source.id]
    if source.kind in (ComponentKind.SOURCE, ComponentKind.GROUND):
        source_pin = src_p1
    else:
        source_pin = src_p2
    target_pin = raw_pins[target.id][0]
    return source_pin, target_pin


def _resolve_ground_reference(
    arena: _PinArena, circuit: CircuitData, raw_pins: Dict[str, Tuple[int, int]]
) -> Optional[int]:
    grounds: List[Component] = list(circuit.iter_kind(ComponentKind.GROUND))
    sources: List[Component] = list(circuit.iter_kind(ComponentKind.SOURCE))

    if grounds:
        reference_pin = raw_pins[grounds[0].id][0]
        for ground in grounds[1:]:
            arena.union(reference_pin, raw_pins[ground.id][0])
    elif sources:
        reference_pin = raw_pins[sources[0].id][1]
        logger.debug(f"No ground component; referencing the negative terminal of '{sources[0].id}'.")
    else:
        logger.debug("Circuit has neither a ground nor a source; node voltages are unreferenced.")
        return None

    for source in sources:
        arena.union(reference_pin, raw_pins[source.id][1])
    return arena.find(reference_pin)


def resolve_nets(circuit: CircuitData) -> NetResolution:
    """
    Resolves the nets of a circuit snapshot.

    Components no wire mentions keep two distinct, unconnected pins. Wires naming
    unknown component ids are skipped with a warning.

    Args:
        circuit: The graph snapshot to analyze.

    Returns:
        A NetResolution mapping every component to its pin nets, plus the ground reference.
    """
    arena = _PinArena()
    raw_pins: Dict[str, Tuple[int, int]] = {}
    for component in circuit.components:
        p1, p2 = arena.allocate(), arena.allocate()
        if component.kind is ComponentKind.GROUND:
            arena.union(p1, p2)
        raw_pins[component.id] = (p1, p2)

    by_id = {c.id: c for c in circuit.components}
    for wire in circuit.wires:
        joined = _wire_pins(wire, by_id, raw_pins)
        if joined is not None:
            arena.union(*joined)

    ground_net = _resolve_ground_reference(arena, circuit, raw_pins)

    pin_of: Dict[str, PinPair] = {}
    touched: Dict[int, None] = {}
    for component in circuit.components:
        p1, p2 = raw_pins[component.id]
        pair = PinPair(arena.find(p1), arena.find(p2))
        pin_of[component.id] = pair
        touched.setdefault(pair.p1)
        touched.setdefault(pair.p2)

    groups = arena.groups()
    nets = {net: groups[net] for net in touched}
    logger.debug(f"Resolved {len(nets)} nets from {len(circuit.components)} components; ground net: {ground_net}.")
    return NetResolution(pin_of=pin_of, ground_net=ground_net, nets=nets)
