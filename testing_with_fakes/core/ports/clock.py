from typing import Protocol


class ClockPort(Protocol):
    def monotonic(self) -> float:
        """Return a monotonic reading in seconds."""
        ...
