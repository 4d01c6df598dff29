"""Driver for the MF4015 steering motor over a CAN interface."""

from dataclasses import dataclass, replace
from typing import Optional

from .can_interface import CANInterface
from .config import Steer

CMD_MOTOR_OFF = 0x80
CMD_MOTOR_ON = 0x88
CMD_MOTOR_STOP = 0x81
CMD_OPEN_LOOP = 0xA0
CMD_TORQUE_CTRL = 0xA1
CMD_READ_ENC = 0x90
CMD_READ_STAT1 = 0x9A
CMD_CLEAR_ERR = 0x9B

# Hysteresis around the usable range, about 5 % of its width.
HYSTERESIS_WIDTH = int((Steer.ANGLE_MAX - Steer.ANGLE_MIN) * 0.05)


def _int16(value: int) -> int:
    value &= 0xFFFF
    return value - 0x10000 if value & 0x8000 else value


def _le16(low: int, high: int) -> int:
    return low | (high << 8)


@dataclass
class MotorStatus:
    """Last reported motor state."""

    encoder: int = 0
    speed: int = 0
    torque_current: int = 0
    temperature: int = 0
    # bit 0: under-voltage protection, bit 3: over-temperature protection
    error_state: int = 0


class MF4015Driver:
    """Sends commands to one motor and decodes its replies."""

    def __init__(self, can: Optional[CANInterface], can_id: int = Steer.CAN_ID):
        self._can = can
        self._can_id = can_id
        self._status = MotorStatus()
        self._torque_limited = False
        self._encoder_updated = False

    def _send_command(self, cmd: int) -> None:
        if self._can is None:
            return
        self._can.send_frame(self._can_id, bytes([cmd]) + bytes(7))

    def enable(self) -> None:
        """Motor on."""
        self._send_command(CMD_MOTOR_ON)

    def disable(self) -> None:
        """Motor off."""
        self._send_command(CMD_MOTOR_OFF)

    def stop(self) -> None:
        """Motor stop."""
        self._send_command(CMD_MOTOR_STOP)

    def request_encoder(self) -> None:
        """Ask for the encoder position."""
        self._send_command(CMD_READ_ENC)

    def clear_error(self) -> None:
        """Clear the motor's error state."""
        self._send_command(CMD_CLEAR_ERR)

    def request_status1(self) -> None:
        """Ask for state 1 and the error flags."""
        self._send_command(CMD_READ_STAT1)

    def set_torque(self, torque: int) -> None:
        """Send a torque command, cut to zero outside the usable steering range."""
        # Application and motor coordinates have opposite sign.
        torque = _int16(-torque)
        raw_pos = Steer.ANGLE_CENTER - self._status.encoder

        if self._torque_limited:
            if (
                Steer.ANGLE_MIN + HYSTERESIS_WIDTH
                <= raw_pos
                <= Steer.ANGLE_MAX - HYSTERESIS_WIDTH
            ):
                self._torque_limited = False
        elif raw_pos < Steer.ANGLE_MIN or raw_pos > Steer.ANGLE_MAX:
            self._torque_limited = True

        if self._torque_limited:
            torque = 0
        torque = max(Steer.TORQUE_MIN, min(Steer.TORQUE_MAX, torque))

        frame = bytes(
            [CMD_TORQUE_CTRL, 0, 0, 0, torque & 0xFF, (torque >> 8) & 0xFF, 0, 0]
        )
        if self._can is not None:
            self._can.send_frame(self._can_id, frame)

    def parse_frame(self, can_id: int, data: bytes) -> bool:
        """Decode a reply; False if it is not a full frame from this motor."""
        if can_id != self._can_id or len(data) < 8:
            return False

        cmd = data[0]
        if cmd == CMD_READ_ENC:
            self._status.encoder = _le16(data[2], data[3])
            self._encoder_updated = True
        elif cmd in (CMD_OPEN_LOOP, CMD_TORQUE_CTRL):
            self._status.temperature = data[1] - 0x100 if data[1] & 0x80 else data[1]
            self._status.torque_current = _int16(_le16(data[2], data[3]))
            self._status.speed = _int16(_le16(data[4], data[5]))
            self._status.encoder = _le16(data[6], data[7])
        elif cmd == CMD_READ_STAT1:
            self._status.error_state = data[7]
        return True

    def encoder_value(self) -> int:
        """Raw encoder position."""
        return self._status.encoder

    def steer_value(self) -> int:
        """Position relative to centre, sign flipped for HID, clamped to the range."""
        relative = Steer.ANGLE_CENTER - self._status.encoder
        return max(Steer.ANGLE_MIN, min(Steer.ANGLE_MAX, relative))

    def status(self) -> MotorStatus:
        """A copy of the last reported status."""
        return replace(self._status)

    def check_encoder_updated(self) -> bool:
        """True once after each encoder reply."""
        updated = self._encoder_updated
        self._encoder_updated = False
        return updated