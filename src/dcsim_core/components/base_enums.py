# src/dcsim_core/components/base_enums.py
from enum import Enum


class ComponentKind(Enum):
    """
    The closed set of component kinds the analysis engine has electrical models for.

    Editor type tags outside this set (capacitors, ICs, logic gates, decorative parts)
    all map to UNMODELED: they keep their pins but contribute no stamp.
    """
    SOURCE = "source"       # Ideal voltage source; p1 is the positive terminal.
    GROUND = "ground"       # Reference point; p1 and p2 are always shorted.
    RESISTOR = "resistor"
    LED = "led"             # Modeled as a fixed resistance.
    SWITCH = "switch"       # Near-short when closed, near-open otherwise.
    UNMODELED = "unmodeled"

    @classmethod
    def from_tag(cls, tag: str) -> "ComponentKind":
        """Maps an editor type tag to its kind; unknown tags become UNMODELED."""
        try:
            kind = cls(tag)
        except ValueError:
            return cls.UNMODELED
        return kind

    @property
    def is_resistive(self) -> bool:
        """True for kinds reduced to an equivalent fixed resistance."""
        return self in (ComponentKind.RESISTOR, ComponentKind.LED, ComponentKind.SWITCH)
