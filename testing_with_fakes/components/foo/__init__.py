"""
Foo component - the unit under test for the fakes walkthrough.

Foo either returns a fixed value or passes through the result of a
HeavyOperationPort collaborator (real Bar or FakeBar).
"""

from .component import (
    DEFAULT_RESULT,
    Foo,
    run,
    run_do_a_thing,
)
from .models import (
    DoAThingInput,
    DoAThingOutput,
)
from .ports import (
    ClockPort,
    HeavyOperationPort,
)

__all__ = [
    # Unit under test
    "DEFAULT_RESULT",
    "Foo",
    # Entry points
    "run",
    "run_do_a_thing",
    # Input models
    "DoAThingInput",
    # Output models
    "DoAThingOutput",
    # Ports
    "ClockPort",
    "HeavyOperationPort",
]
