"""Compliance, validation and snapshot models."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date, datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from gsp_common.models.host import AdapterStatus, FactKind, HostFact


class Severity(str, Enum):
    OK = "OK"
    WARNING = "Warning"
    CRITICAL = "Critical"
    UNKNOWN = "Unknown"


class ComplianceResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    aging_days: int | None = Field(default=None, ge=0)
    severity: Severity = Severity.UNKNOWN


class ValidationStatus(str, Enum):
    VALIDATED = "Validated"
    NOT_VALIDATED = "NotValidated"
    UNKNOWN = "Unknown"


class ValidationState(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: ValidationStatus
    validated_on: date | None = None


class Snapshot(BaseModel):
    """Everything one refresh observed. Never mutated after creation."""

    model_config = ConfigDict(frozen=True)

    taken_at: datetime
    facts: tuple[HostFact, ...]
    compliance: ComplianceResult
    validation: ValidationState

    @field_validator("facts", mode="before")
    @classmethod
    def _facts_from_mapping(cls, value: Any) -> Any:
        if isinstance(value, Mapping):
            return tuple(value.values())
        return value

    @field_validator("facts")
    @classmethod
    def _unique_kinds(cls, value: tuple[HostFact, ...]) -> tuple[HostFact, ...]:
        kinds = [fact.kind for fact in value]
        if len(kinds) != len(set(kinds)):
            raise ValueError("a snapshot holds at most one fact per kind")
        return value

    def get(self, kind: FactKind) -> HostFact | None:
        for fact in self.facts:
            if fact.kind is kind:
                return fact
        return None

    def fact(self, kind: FactKind) -> HostFact:
        found = self.get(kind)
        if found is None:
            raise KeyError(kind)
        return found


class ToggleOutcome(BaseModel):
    """Result of a successful adapter toggle. State must be re-read afterwards."""

    model_config = ConfigDict(frozen=True)

    adapter: str
    previous: AdapterStatus
    current: AdapterStatus
    refresh_required: bool = True
