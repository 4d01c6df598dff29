"""Physical force effects (spring, damper, friction, inertia) and a PID loop."""

_OUTPUT_LIMIT = 32767.0


def _saturate(value: float) -> int:
    if value > _OUTPUT_LIMIT:
        value = _OUTPUT_LIMIT
    if value < -_OUTPUT_LIMIT:
        value = -_OUTPUT_LIMIT
    return int(value)


class PhysicalEffect:
    """Restoring force computed from angle, velocity and acceleration."""

    def __init__(
        self,
        k_friction: float,
        k_spring: float,
        k_damper: float,
        k_inertia: float,
        period_us: int,
    ):
        self._k_friction = k_friction
        self._k_spring = k_spring
        self._k_damper = k_damper
        self._k_inertia = k_inertia
        self._dt = period_us / 1_000_000.0
        self._prev_angle = 0.0
        self._prev_velocity = 0.0
        self._output = 0

    def update(self, angle: int) -> None:
        """Advance one period with a new angle sample."""
        f_angle = float(angle)
        velocity = (f_angle - self._prev_angle) / self._dt
        acceleration = (velocity - self._prev_velocity) / self._dt

        if velocity > 0.1:
            direction = 1.0
        elif velocity < -0.1:
            direction = -1.0
        else:
            direction = 0.0

        total = -(
            self._k_friction * direction
            + self._k_spring * f_angle
            + self._k_damper * velocity
            + self._k_inertia * acceleration
        )
        self._output = _saturate(total)
        self._prev_angle = f_angle
        self._prev_velocity = velocity

    def effect(self) -> int:
        """The most recently computed force."""
        return self._output


class PID:
    """Proportional-integral-derivative controller toward a target angle."""

    def __init__(self, kp: float, ki: float, kd: float, period_us: int, target: int):
        self._kp = kp
        self._ki = ki
        self._kd = kd
        self._dt = period_us / 1_000_000.0
        self._target = target
        self._integral = 0.0
        self._prev_error = 0.0
        self._output = 0

    def update(self, current_angle: int) -> None:
        """Advance one period with the measured angle."""
        error = float(self._target - current_angle)
        self._integral += error * self._dt
        derivative = (error - self._prev_error) / self._dt
        total = self._kp * error + self._ki * self._integral + self._kd * derivative
        self._output = _saturate(total)
        self._prev_error = error

    def output(self) -> int:
        """The most recently computed control output."""
        return self._output

    def set_target(self, target: int) -> None:
        """Change the setpoint."""
        self._target = target