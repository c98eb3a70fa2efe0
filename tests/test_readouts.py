# tests/test_readouts.py
import pytest

from dcsim_core import WireActivity, multimeter_reading, run_advanced_simulation, wire_activity, wire_current
from dcsim_core.analysis import wire_currents


class TestWireReadouts:

    def test_wire_current_is_larger_endpoint_magnitude(self, led_circuit):
        result = run_advanced_simulation(led_circuit)
        currents = wire_currents(led_circuit, result)
        expected = 9.0 / 380.0
        assert currents["e1"] == pytest.approx(expected)   # battery -> resistor
        assert currents["e3"] == pytest.approx(expected)   # LED -> ground
        assert wire_current(result, led_circuit.wires[1]) == pytest.approx(expected)

    @pytest.mark.parametrize("current, bucket", [
        (0.0, WireActivity.IDLE),
        (5.0e-7, WireActivity.IDLE),
        (1.0e-3, WireActivity.LOW),
        (-0.05, WireActivity.MEDIUM),
        (0.1, WireActivity.HIGH),
        (2.0, WireActivity.HIGH),
    ])
    def test_activity_buckets(self, current, bucket):
        assert wire_activity(current) is bucket


class TestMultimeter:

    def test_resistor_reading(self, led_circuit):
        result = run_advanced_simulation(led_circuit)
        reading = multimeter_reading(result, led_circuit.get_component("n2"))
        assert reading.label == "330Ω"
        assert reading.current.to("mA").magnitude == pytest.approx(1000 * 9.0 / 380.0)
        assert reading.format() == "V: 9.00 V | I: 23.7 mA | P: 185.1 mW"

    def test_ground_has_no_reading(self, led_circuit):
        result = run_advanced_simulation(led_circuit)
        assert multimeter_reading(result, led_circuit.get_component("n4")) is None

    def test_led_reading(self, led_circuit):
        result = run_advanced_simulation(led_circuit)
        reading = multimeter_reading(result, led_circuit.get_component("n3"))
        assert reading.format() == "V: 1.18 V | I: 23.7 mA | P: 28.0 mW"
