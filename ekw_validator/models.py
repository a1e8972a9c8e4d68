"""
Pydantic models for EKW numbers — strict typing as our first line of defense.

The parsed number keeps every part verbatim. Nothing is trimmed or
upper-cased here; the validators decide what the parts are worth.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from .config import ValidationSettings

PARTS_SEPARATOR = "/"


# ─── Severity Levels ────────────────────────────────────────────────


class Severity(str, Enum):
    """Severity of a validation finding."""

    ERROR = "ERROR"  # Fatal — number MUST be rejected
    WARNING = "WARNING"  # Suspicious — needs human review


# ─── Validation Finding ─────────────────────────────────────────────


class ValidationFinding(BaseModel):
    """A single validation finding with severity, machine-readable code, and details."""

    severity: Severity
    code: str  # Machine-readable, e.g. "SUM_CONTROL_MISMATCH"
    field: str  # Which part of the number this relates to
    message: str  # Human-readable explanation
    details: dict = Field(default_factory=dict)


# ─── EKW Number ─────────────────────────────────────────────────────


class EkwNumber(BaseModel):
    """A parsed EKW number: area code / register number / optional check digit.

    Immutable. A check digit read from input is unverified; one marked
    trusted is returned as-is by the checksum calculator and never
    recomputed. Safe to share between threads since nothing is cached.
    """

    model_config = {"frozen": True}

    area_code: str  # geo ID, e.g. "PR1J"
    register_number: str  # lam ID, e.g. "00104856"
    check_digit: Optional[str] = None
    check_digit_trusted: bool = False

    @model_validator(mode="after")
    def check_trusted_digit(self) -> EkwNumber:
        if self.check_digit_trusted and self.check_digit is None:
            raise ValueError("a trusted EKW number must carry its check digit")
        return self

    def __str__(self) -> str:
        parts = [self.area_code, self.register_number]
        if self.check_digit is not None:
            parts.append(self.check_digit)
        return PARTS_SEPARATOR.join(parts)


# ─── Validation Report ──────────────────────────────────────────────


class ValidationReport(BaseModel):
    """The final output of the validation engine."""

    raw: str
    is_valid: bool
    findings: list[ValidationFinding] = Field(default_factory=list)
    number: Optional[EkwNumber] = None
    computed_check_digit: Optional[str] = None
    settings: ValidationSettings = Field(default_factory=ValidationSettings)
