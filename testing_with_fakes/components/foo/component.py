"""
Foo component - the unit under test.

Shows the two dependency shapes:
- no collaborator: do_a_thing() returns a fixed value
- collaborator: do_a_thing(bar) hands back whatever bar computes

Key behaviors:
- Collaborator arrives by constructor or by parameter; the parameter wins
- The collaborator is called exactly once per do_a_thing
- Its result is passed through unchanged (pass-through law)
- Its exceptions are passed through unchanged too
- Foo never looks at the collaborator's concrete type
"""

from __future__ import annotations

import logging

from testing_with_fakes.adapters.clock import SystemMonotonicClock

from .models import DoAThingInput, DoAThingOutput
from .ports import ClockPort, HeavyOperationPort

logger = logging.getLogger(__name__)

DEFAULT_RESULT = 42


class Foo:
    """
    Unit under test.

    Args:
        bar: Optional collaborator injected at construction
        default_result: Value returned when no collaborator is available
    """

    def __init__(
        self,
        bar: HeavyOperationPort | None = None,
        *,
        default_result: int = DEFAULT_RESULT,
    ) -> None:
        self._bar = bar
        self._default_result = default_result

    def do_a_thing(self, bar: HeavyOperationPort | None = None) -> int:
        """
        Do a thing, optionally by asking a collaborator.

        Args:
            bar: Collaborator for this call; overrides the injected one

        Returns:
            The collaborator's result, or the default when there is none
        """
        collaborator = bar if bar is not None else self._bar
        if collaborator is None:
            return self._default_result

        return collaborator.perform_heavy_operation()


def run_do_a_thing(
    inp: DoAThingInput,
    foo: Foo | None = None,
    clock: ClockPort | None = None,
) -> DoAThingOutput:
    foo = foo or Foo()
    clock = clock or SystemMonotonicClock()

    started = clock.monotonic()
    try:
        result = foo.do_a_thing(inp.collaborator)
    except Exception as e:
        logger.warning(f"do_a_thing failed in collaborator: {e!r}")
        raise
    elapsed_ms = (clock.monotonic() - started) * 1000

    logger.debug(f"do_a_thing: result={result}, elapsed_ms={elapsed_ms:.1f}")
    return DoAThingOutput(result=result, elapsed_ms=elapsed_ms)


def run(
    inp: DoAThingInput,
    *,
    foo: Foo | None = None,
    clock: ClockPort | None = None,
) -> DoAThingOutput:
    if isinstance(inp, DoAThingInput):
        return run_do_a_thing(inp, foo, clock)

    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
