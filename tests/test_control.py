import pytest

from ffbwheel.control import PID, PhysicalEffect


def test_effect_starts_at_zero():
    eff = PhysicalEffect(1.0, 1.0, 1.0, 1.0, 1000)
    assert eff.effect() == 0


@pytest.mark.parametrize("angle", [50, -50, 3000, -3000])
def test_spring_opposes_angle(angle):
    eff = PhysicalEffect(0.0, 0.5, 0.0, 0.0, 1000)
    eff.update(angle)
    result = eff.effect()
    assert result * angle < 0


def test_spring_unit_coefficient_returns_negated_angle():
    eff = PhysicalEffect(0.0, 1.0, 0.0, 0.0, 1000)
    eff.update(1234)
    assert eff.effect() == -1234


def test_effect_saturates():
    eff = PhysicalEffect(0.0, 1000.0, 0.0, 0.0, 1000)
    eff.update(1000)
    assert eff.effect() == -32767
    eff.update(-1000)
    assert eff.effect() == 32767


def test_friction_opposes_motion_direction():
    eff = PhysicalEffect(10.0, 0.0, 0.0, 0.0, 1000)
    eff.update(5)
    assert eff.effect() == -10
    eff.update(5)
    assert eff.effect() == 0
    eff.update(0)
    assert eff.effect() == 10


def test_damper_vanishes_at_rest():
    eff = PhysicalEffect(0.0, 0.0, 0.01, 0.0, 1000)
    eff.update(100)
    moving = eff.effect()
    eff.update(100)
    assert moving < 0
    assert eff.effect() == 0


def test_pid_zero_at_target():
    pid = PID(2.0, 1.0, 0.5, 1000, 300)
    pid.update(300)
    assert pid.output() == 0


def test_pid_proportional_only():
    pid = PID(1.0, 0.0, 0.0, 1000, 100)
    pid.update(40)
    assert pid.output() == 60
    pid.update(160)
    assert pid.output() == -60


def test_pid_truncates_toward_zero():
    pid = PID(0.5, 0.0, 0.0, 1000, 3)
    pid.update(0)
    assert pid.output() == 1
    pid.update(6)
    assert pid.output() == -1


def test_pid_integral_accumulates():
    pid = PID(0.0, 1000.0, 0.0, 1000, 1000)
    outputs = []
    for _ in range(5):
        pid.update(0)
        outputs.append(pid.output())
    assert outputs == sorted(outputs)
    assert outputs[0] < outputs[-1]


def test_pid_saturates():
    pid = PID(100.0, 0.0, 0.0, 1000, 30000)
    pid.update(-30000)
    assert pid.output() == 32767


def test_pid_set_target():
    pid = PID(1.0, 0.0, 0.0, 1000, 0)
    pid.set_target(250)
    pid.update(250)
    assert pid.output() == 0
    pid.update(0)
    assert pid.output() == 250