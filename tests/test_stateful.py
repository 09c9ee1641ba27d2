import pytest

from feedctl import InvalidConfigurationError, StatefulController


def test_tracks_error_last_error_sum_error():
    sc = StatefulController(100)
    assert sc.error == 0.0
    assert sc.last_error == 0.0
    assert sc.sum_error == 0.0
    assert sc.dt == 0.001

    output = sc.update(50)
    assert sc.output == output
    assert sc.measure == 50
    assert sc.error == pytest.approx(50.0)
    assert sc.last_error == 0.0
    assert sc.sum_error == pytest.approx(50.0 * sc.dt)

    output = sc.update(75)
    assert sc.output == output
    assert sc.measure == 75
    assert sc.error == pytest.approx(25.0)
    assert sc.last_error == pytest.approx(50.0)
    assert sc.sum_error == pytest.approx(75.0 * sc.dt)


def test_resets_sum_error_after_crossing_setpoint():
    sc = StatefulController(100)
    sc.update(50)
    sc.update(75)
    assert sc.sum_error == pytest.approx(75.0 * sc.dt)
    sc.update(125)
    assert sc.error == -25.0
    assert sc.sum_error == sc.error * sc.dt


def test_resets_sum_error_when_error_reaches_zero():
    sc = StatefulController(100, dt=0.1)
    sc.update(50)
    sc.update(60)
    sc.update(100)
    assert sc.sum_error == 0.0
    sc.update(90)
    assert sc.sum_error == 10.0 * 0.1


def test_accumulates_while_sign_is_unchanged():
    sc = StatefulController(0, dt=0.5)
    for _ in range(4):
        sc.update(2)
    assert sc.sum_error == -4.0


def test_setpoint_is_mutable():
    sc = StatefulController(10)
    sc.setpoint = 20
    assert sc.update(5) == 15


@pytest.mark.parametrize("dt", [0, 0.0, -0.01])
def test_rejects_non_positive_dt(dt):
    with pytest.raises(InvalidConfigurationError):
        StatefulController(1, dt=dt)


def test_rejects_non_positive_dt_assignment():
    sc = StatefulController(1)
    with pytest.raises(InvalidConfigurationError):
        sc.dt = 0
    assert sc.dt == 0.001


def test_reset_keeps_setpoint_and_dt():
    sc = StatefulController(10, dt=0.01)
    sc.update(3)
    sc.update(4)
    sc.reset()
    assert (sc.measure, sc.error, sc.last_error, sc.sum_error) == (0.0, 0.0, 0.0, 0.0)
    assert sc.setpoint == 10
    assert sc.dt == 0.01
    assert isinstance(str(sc), str)
