# testing-with-fakes — Ports (Protocol Interfaces)
# Abstract interfaces for adapters; no implementations here

from testing_with_fakes.core.ports.clock import ClockPort
from testing_with_fakes.core.ports.heavy import HeavyOperationPort

__all__ = [
    "ClockPort",
    "HeavyOperationPort",
]
