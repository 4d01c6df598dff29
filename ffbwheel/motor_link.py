"""Direct command set for the steering motor, tracking only the encoder."""

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
CMD_READ_STAT2 = 0x9C


class MotorLink:
    """Sends raw motor commands and picks the encoder out of replies."""

    def __init__(self, can: Optional[CANInterface]):
        self._can = can
        self._encoder = 0

    def _command(self, cmd: int) -> None:
        if self._can is None:
            return
        self._can.send_frame(Steer.CAN_ID, bytes([cmd]) + bytes(7))

    def motor_off(self) -> None:
        """Motor off."""
        self._command(CMD_MOTOR_OFF)

    def motor_on(self) -> None:
        """Motor on."""
        self._command(CMD_MOTOR_ON)

    def motor_stop(self) -> None:
        """Motor stop."""
        self._command(CMD_MOTOR_STOP)

    def read_encoder(self) -> None:
        """Ask for the encoder position."""
        self._command(CMD_READ_ENC)

    def read_stat1(self) -> None:
        """Ask for state 1 and the error flags."""
        self._command(CMD_READ_STAT1)

    def read_stat2(self) -> None:
        """Ask for state 2."""
        self._command(CMD_READ_STAT2)

    def clear_error(self) -> None:
        """Clear the motor's error state."""
        self._command(CMD_CLEAR_ERR)

    def set_torque(self, value: int) -> None:
        """Closed-loop torque command, clamped to the configured limits."""
        if self._can is None:
            return
        value = max(Steer.TORQUE_MIN, min(Steer.TORQUE_MAX, value))
        frame = bytes(
            [CMD_TORQUE_CTRL, 0, 0, 0, value & 0xFF, (value >> 8) & 0xFF, 0, 0]
        )
        self._can.send_frame(Steer.CAN_ID, frame)

    def encoder_value(self) -> int:
        """The last encoder position received."""
        return self._encoder

    def poll(self) -> bool:
        """Read one frame; True if it was a full reply from the motor."""
        if self._can is None:
            return False
        frame = self._can.read_frame()
        if frame is None:
            return False
        if frame.can_id != Steer.CAN_ID or len(frame.data) != 8:
            return False
        data = frame.data
        if data[0] == CMD_READ_ENC:
            self._encoder = data[3] * 256 + data[2]
        elif data[0] in (CMD_OPEN_LOOP, CMD_TORQUE_CTRL):
            self._encoder = data[7] * 256 + data[6]
        return True