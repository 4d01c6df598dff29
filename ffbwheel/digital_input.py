"""Debounced digital input channel."""

from typing import Callable

HIGH = 1
LOW = 0


class DigitalInputChannel:
    """Changes state only after a run of consistent readings."""

    def __init__(self, read: Callable[[], int], threshold: int):
        self._read = read
        self._threshold = threshold
        self._counter = threshold
        self._status = HIGH

    def init(self) -> None:
        """Reset to the released (HIGH) state."""
        self._counter = self._threshold
        self._status = HIGH

    def update(self) -> int:
        """Read the pin once and return the debounced state."""
        if self._read() > 0:
            self._counter += 1
            if self._counter > self._threshold:
                self._counter = self._threshold
                self._status = HIGH
        else:
            self._counter -= 1
            if self._counter < 0:
                self._counter = 0
                self._status = LOW
        return self._status

    def state(self) -> int:
        """The current debounced state."""
        return self._status