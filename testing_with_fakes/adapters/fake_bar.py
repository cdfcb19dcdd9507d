"""
Fake Bar adapter (HeavyOperationPort test double).

Deterministic, instantaneous stand-in for Bar. Holds a single canned value
and returns it from every call.

Configuration surface is one option, ``{"returnValue": V}``. Anything else
is rejected so a typo in a test fails loudly instead of silently falling
back to a default.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from testing_with_fakes.core.ports.heavy import HeavyOperationPort

logger = logging.getLogger(__name__)

RETURN_VALUE_OPTION = "returnValue"


class FakeConfigurationError(ValueError):
    """Raised when a FakeBar is configured with bad options."""


def _check_int(value: Any) -> int:
    # bool is an int subclass; True is not a meaningful canned value
    if isinstance(value, bool) or not isinstance(value, int):
        raise FakeConfigurationError(
            f"{RETURN_VALUE_OPTION} must be an integer, got {type(value).__name__}"
        )
    return value


class FakeBar:
    """
    Test double returning a canned value.

    No delay, no side effects, no state beyond the canned value.

    Implements HeavyOperationPort protocol.
    """

    def __init__(self, return_value: int) -> None:
        self._return_value = _check_int(return_value)

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> FakeBar:
        """
        Build a fake from an options mapping.

        Args:
            options: Must be exactly ``{"returnValue": <int>}``

        Raises:
            FakeConfigurationError: Unknown key, missing returnValue, or
                non-integer value
        """
        unknown = sorted(set(options) - {RETURN_VALUE_OPTION})
        if unknown:
            raise FakeConfigurationError(f"Unknown fake options: {', '.join(unknown)}")
        if RETURN_VALUE_OPTION not in options:
            raise FakeConfigurationError(f"Missing required option: {RETURN_VALUE_OPTION}")
        return cls(options[RETURN_VALUE_OPTION])

    @property
    def return_value(self) -> int:
        return self._return_value

    def configure(self, return_value: int) -> None:
        """Replace the canned value."""
        self._return_value = _check_int(return_value)

    def perform_heavy_operation(self) -> int:
        logger.debug(f"FakeBar.perform_heavy_operation: result={self._return_value}")
        return self._return_value

    def __repr__(self) -> str:
        return f"FakeBar(return_value={self._return_value!r})"


def _verify_protocol_compliance() -> None:
    _adapter: HeavyOperationPort = FakeBar(0)


_verify_protocol_compliance()
