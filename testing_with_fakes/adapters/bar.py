"""
Bar adapter (HeavyOperationPort implementation).

The production collaborator. Simulates expensive work by blocking the
calling thread for a fixed delay before returning its result.

Key behaviors:
- Blocks for the whole delay; nothing is cancellable
- Delay and sleep function are injectable so tests can observe the
  requested latency without paying for it
- Returns the configured result (42 unless told otherwise)
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field

from testing_with_fakes.core.ports.heavy import HeavyOperationPort
from testing_with_fakes.rules.models import BarRules

logger = logging.getLogger(__name__)

DEFAULT_DELAY_SECONDS = 1.0
DEFAULT_RESULT = 42


@dataclass
class Bar:
    """
    Slow collaborator that does the "real" work.

    This adapter satisfies the HeavyOperationPort protocol.
    """

    delay_seconds: float = DEFAULT_DELAY_SECONDS
    result: int = DEFAULT_RESULT
    sleep: Callable[[float], None] = field(default=time.sleep, repr=False)

    def __post_init__(self) -> None:
        if self.delay_seconds < 0:
            raise ValueError(
                f"delay_seconds must be >= 0, got {self.delay_seconds}"
            )

    def perform_heavy_operation(self) -> int:
        """
        Block for delay_seconds, then return the result.

        Returns:
            The configured result
        """
        logger.debug(f"Bar.perform_heavy_operation: sleeping {self.delay_seconds}s")
        # This is where we fake some heavy lifting
        self.sleep(self.delay_seconds)
        logger.debug(f"Bar.perform_heavy_operation: result={self.result}")
        return self.result


def create_bar(
    rules: BarRules | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> Bar:
    """
    Build a Bar from rules.

    Args:
        rules: Bar settings (delay in milliseconds, result); defaults if None
        sleep: Sleep function, time.sleep unless a test swaps it

    Returns:
        Configured Bar
    """
    rules = rules or BarRules()
    return Bar(
        delay_seconds=rules.delay_ms / 1000,
        result=rules.result,
        sleep=sleep,
    )


# Verify protocol compliance at module load time
def _verify_protocol_compliance() -> None:
    """Verify Bar satisfies HeavyOperationPort protocol."""
    _adapter: HeavyOperationPort = Bar(delay_seconds=0)


_verify_protocol_compliance()
