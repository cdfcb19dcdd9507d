from dataclasses import dataclass

from .ports import HeavyOperationPort


@dataclass
class DoAThingInput:
    collaborator: HeavyOperationPort | None = None


@dataclass(frozen=True)
class DoAThingOutput:
    result: int
    elapsed_ms: float
