import pytest

from feedctl.devices import Controller, Device, FirstOrderPlant, Heater, Thermostat
from feedctl.errors import InvalidConfigurationError


def test_device_output_and_str():
    device = Device()
    assert isinstance(device.output, float)
    assert isinstance(str(device), str)
    assert isinstance(device.update(2.34), float)
    assert device.output == 2.34


def test_heater_output_requires_knob():
    h = Heater(1000)
    assert h.knob == 0
    assert h.output == 0
    h.knob = 1
    assert h.output > 0
    assert isinstance(str(h), str)


def test_heater_update_sets_knob():
    h = Heater(1000)
    output = h.update(1)
    assert output > 0
    assert h.knob == 1
    assert h.output == output


def test_heater_knob_is_capped():
    h = Heater(1000)
    assert h.update(2) == 1000
    assert h.update(-1) == 0


def test_controller_output_is_error():
    c = Controller(500)
    assert isinstance(c.output, float)
    assert c.output == 500
    assert isinstance(str(c), str)
    assert c.update(499) == 1.0


def test_thermostat_switches_around_setpoint():
    t = Thermostat(25)
    assert t.update(20) is True
    assert t.update(30) is False
    assert t.update(20) is True


def test_first_order_plant_steps_towards_gain_times_command():
    plant = FirstOrderPlant(gain=2.0, tau=1.0, dt=0.1)
    assert plant.output == 0.0
    assert plant.update(1.0) == pytest.approx(0.2)
    assert plant.command == 1.0
    for _ in range(500):
        plant.update(1.0)
    assert plant.output == pytest.approx(2.0)


def test_first_order_plant_rejects_bad_tau():
    with pytest.raises(InvalidConfigurationError):
        FirstOrderPlant(tau=0.0)
