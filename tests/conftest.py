# tests/conftest.py
import pytest

from dcsim_core import CircuitData, Component, ComponentKind, Wire


def make_circuit(components_def: list, wires_def: list) -> CircuitData:
    """
    Builds a CircuitData snapshot from compact definitions.
    components_def: e.g. [("n1", "source", "9V Battery", "9V"), ("n4", "ground", "GND", None)]
    wires_def: e.g. [("n1", "n2"), ("n2", "n3")]; wire ids are generated as e1, e2, ...
    """
    components = [
        Component(
            id=comp_id,
            kind=ComponentKind.from_tag(type_tag),
            label=label,
            value=value,
            x=100.0 * i,
            y=300.0,
            type_tag=type_tag,
        )
        for i, (comp_id, type_tag, label, value) in enumerate(components_def)
    ]
    wires = [Wire(id=f"e{i + 1}", source_id=src, target_id=tgt) for i, (src, tgt) in enumerate(wires_def)]
    return CircuitData(components=components, wires=wires)


@pytest.fixture
def led_circuit() -> CircuitData:
    """The 'Simple LED Circuit' preset: 9 V battery -> 330 ohm -> red LED -> ground."""
    return make_circuit(
        [
            ("n1", "source", "9V Battery", "9V"),
            ("n2", "resistor", "330Ω", "330Ω"),
            ("n3", "led", "Red LED", "Red"),
            ("n4", "ground", "GND", None),
        ],
        [("n1", "n2"), ("n2", "n3"), ("n3", "n4")],
    )


@pytest.fixture
def divider_circuit() -> CircuitData:
    """10 V source driving two 10 kOhm resistors in series to ground."""
    return make_circuit(
        [
            ("n1", "source", "10V", "10V"),
            ("n2", "resistor", "R1 (10k)", "10kΩ"),
            ("n3", "resistor", "R2 (10k)", "10kΩ"),
            ("n4", "ground", "GND", None),
        ],
        [("n1", "n2"), ("n2", "n3"), ("n3", "n4")],
    )


@pytest.fixture
def switched_led_circuit():
    """Factory for the 'Switch-Controlled Light' preset with a given switch state."""
    def _build(switch_state: str) -> CircuitData:
        return make_circuit(
            [
                ("n1", "source", "9V", "9V"),
                ("n2", "switch", "SW1", switch_state),
                ("n3", "resistor", "330Ω", "330Ω"),
                ("n4", "led", "LED", "Green"),
                ("n5", "ground", "GND", None),
            ],
            [("n1", "n2"), ("n2", "n3"), ("n3", "n4"), ("n4", "n5")],
        )
    return _build
