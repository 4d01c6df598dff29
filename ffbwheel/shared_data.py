"""State shared between the host-facing loop and the control loop."""

import struct
from dataclasses import dataclass

# int16 target torque, two bytes of alignment padding, two uint32 counters.
_LAYOUT = struct.Struct("<hxxII")

SHARED_DATA_SIZE = _LAYOUT.size


@dataclass
class SharedData:
    """Control-loop status that lives outside the HID reports."""

    target_torque: int = 0
    core1_loop_count: int = 0
    last_core1_micros: int = 0

    def to_bytes(self) -> bytes:
        """Serialise to the fixed binary layout."""
        try:
            return _LAYOUT.pack(
                self.target_torque, self.core1_loop_count, self.last_core1_micros
            )
        except struct.error as exc:
            raise ValueError(f"shared data field out of range: {exc}") from exc

    @classmethod
    def from_bytes(cls, data: bytes) -> "SharedData":
        """Build from the fixed binary layout; the length must match exactly."""
        if len(data) != SHARED_DATA_SIZE:
            raise ValueError(
                f"expected {SHARED_DATA_SIZE} bytes of shared data, got {len(data)}"
            )
        target_torque, loop_count, last_micros = _LAYOUT.unpack(data)
        return cls(target_torque, loop_count, last_micros)