from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class FooRules(BaseModel):
    default_result: int = 42


class BarRules(BaseModel):
    delay_ms: int = Field(default=1000, ge=0)
    result: int = 42


class LoggingRules(BaseModel):
    level: LogLevel = "INFO"


class Rules(BaseModel):
    foo: FooRules = Field(default_factory=FooRules)
    bar: BarRules = Field(default_factory=BarRules)
    logging: LoggingRules = Field(default_factory=LoggingRules)

    model_config = ConfigDict(extra="forbid")
