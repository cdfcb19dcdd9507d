"""
Heavy operation port.

Protocol-based interface for a collaborator that performs one expensive
computation and hands back an integer.

Implementations:
1. Bar: blocks for a configured delay, then returns its result (production)
2. FakeBar: returns a canned value immediately (tests)

Both satisfy the protocol structurally; neither inherits from it. Callers
depend on this port only and must not care which implementation they got.
"""

from __future__ import annotations

from typing import Protocol


class HeavyOperationPort(Protocol):
    """
    Port for a collaborator doing expensive work.

    No error type is defined here. An implementation that fails raises its
    own exception, and callers let it through untouched.
    """

    def perform_heavy_operation(self) -> int:
        """
        Do the heavy lifting.

        Returns:
            An integer. No range is promised beyond what the implementation
            (or the test configuring it) chooses.
        """
        ...
