from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .cause import CauseHint


class OperationIdentity(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    family: str = Field(min_length=1)
    name: str = Field(min_length=1)
    arity: int = Field(ge=0)

    def label(self) -> str:
        return f"{self.family}:{self.name}/{self.arity}"


class DiagnosticRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True, arbitrary_types_allowed=True)

    operation: OperationIdentity
    args: tuple[Any, ...]
    cause: str = CauseHint.NONE.value

    @field_validator("cause", mode="before")
    @classmethod
    def _default_cause(cls, cause: object) -> object:
        if cause is None:
            return CauseHint.NONE.value
        return str(cause)

    @model_validator(mode="after")
    def _validate_arity(self) -> DiagnosticRequest:
        if self.operation.arity != len(self.args):
            raise ValueError(
                f"operation arity {self.operation.arity} does not match "
                f"{len(self.args)} supplied arguments"
            )
        return self


class DiagnosticReport(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    operation: OperationIdentity
    cause: str
    messages: dict[int, str]

    @field_validator("messages")
    @classmethod
    def _validate_positions(cls, messages: dict[int, str]) -> dict[int, str]:
        for position, text in messages.items():
            if position < 1:
                raise ValueError("argument positions are 1-based")
            if not text:
                raise ValueError("diagnostic messages must be non-empty")
        return {position: messages[position] for position in sorted(messages)}

    @model_validator(mode="after")
    def _validate_within_arity(self) -> DiagnosticReport:
        if any(position > self.operation.arity for position in self.messages):
            raise ValueError("argument position exceeds the operation arity")
        return self
