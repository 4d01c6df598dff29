"""Moving-average analogue input channel."""

from collections import deque
from typing import Callable, Optional


class ADInputChannel:
    """Keeps a window of raw readings and reports their converted average."""

    def __init__(
        self,
        read: Callable[[], int],
        buffer_size: int,
        transform: Optional[Callable[[int], int]] = None,
    ):
        if buffer_size < 1:
            raise ValueError("buffer_size must be at least 1")
        self._read = read
        self._transform = transform
        self._buffer: deque = deque(maxlen=buffer_size)
        self._sum = 0

    def init(self) -> None:
        """Discard all readings."""
        self._buffer.clear()
        self._sum = 0

    def sample(self) -> None:
        """Take one raw reading into the window without converting it."""
        new_value = self._read()
        if len(self._buffer) == self._buffer.maxlen:
            self._sum -= self._buffer[0]
        self._buffer.append(new_value)
        self._sum += new_value

    def value(self) -> int:
        """Converted average of the window, or 0 until the window is full."""
        if len(self._buffer) < self._buffer.maxlen:
            return 0
        average = int(self._sum / self._buffer.maxlen)
        if self._transform is not None:
            return self._transform(average)
        return average

    def raw_latest(self) -> int:
        """The most recent raw reading, or 0 if there is none."""
        return self._buffer[-1] if self._buffer else 0