"""Abstract CAN bus interface and an in-memory bus."""

from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, List, Optional

MAX_DATA_LENGTH = 8


@dataclass(frozen=True)
class CanFrame:
    """One CAN frame: identifier and up to eight data bytes."""

    can_id: int
    data: bytes = field(default=b"")

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", bytes(self.data))
        if len(self.data) > MAX_DATA_LENGTH:
            raise ValueError(f"CAN frame data is limited to {MAX_DATA_LENGTH} bytes")


class CANInterface(ABC):
    """What a CAN controller must provide."""

    @abstractmethod
    def begin(self) -> bool:
        """Initialise the controller; True on success."""

    @abstractmethod
    def send_frame(self, can_id: int, data: bytes) -> bool:
        """Transmit a frame; True on success."""

    @abstractmethod
    def read_frame(self) -> Optional[CanFrame]:
        """Return the next received frame, or None if there is none."""

    @abstractmethod
    def available(self) -> bool:
        """True if a received frame is waiting."""


class MemoryCANBus(CANInterface):
    """A CAN bus held in memory: records sent frames and replays injected ones."""

    def __init__(self) -> None:
        self.sent: List[CanFrame] = []
        self._rx: Deque[CanFrame] = deque()
        self.started = False

    def begin(self) -> bool:
        self.started = True
        return True

    def send_frame(self, can_id: int, data: bytes) -> bool:
        self.sent.append(CanFrame(can_id, bytes(data)[:MAX_DATA_LENGTH]))
        return True

    def read_frame(self) -> Optional[CanFrame]:
        return self._rx.popleft() if self._rx else None

    def available(self) -> bool:
        return bool(self._rx)

    def inject(self, can_id: int, data: bytes) -> None:
        """Queue a frame as though it had been received."""
        self._rx.append(CanFrame(can_id, bytes(data)[:MAX_DATA_LENGTH]))