from typing import Protocol


class HeavyOperationPort(Protocol):
    """Collaborator Foo hands the real work to."""

    def perform_heavy_operation(self) -> int: ...


class ClockPort(Protocol):
    """Port for timing - enables deterministic testing."""

    def monotonic(self) -> float:
        """Monotonic reading in seconds."""
        ...
