"""
Custom exception hierarchy for EKW numbers.

Parse errors are raised by the parser because nothing can be validated
without the two required parts. Validation errors are only raised on request
(EkwValidator.ensure_valid); the validators themselves report findings.
"""

from __future__ import annotations


class EkwError(Exception):
    """Base exception for all EKW number failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


# ─── Parse Errors ────────────────────────────────────────────────────


class EkwParseError(EkwError):
    """The raw string does not have the geo/lam[/sum] shape."""


class IncompleteNumberError(EkwParseError):
    """Only one part was supplied; the register number is required."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INCOMPLETE", message, details)


class UnsupportedFormatError(EkwParseError):
    """More than three parts were supplied."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("UNSUPPORTED", message, details)


# ─── Validation Errors ───────────────────────────────────────────────


class EkwValidationError(EkwError):
    """A parsed number failed one of the validation rules."""


class FirstPartFormatError(EkwValidationError):
    """The area code is not two letters, a digit and a letter."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("FIRST_PART_UNKNOWN_FORMAT", message, details)


class SecondPartFormatError(EkwValidationError):
    """The register number is not exactly eight digits."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("SECOND_PART_UNKNOWN_FORMAT", message, details)


class SumControlMismatchError(EkwValidationError):
    """The supplied check digit disagrees with the computed one."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("SUM_CONTROL_MISMATCH", message, details)


VALIDATION_ERRORS_BY_CODE: dict[str, type[EkwValidationError]] = {
    "FIRST_PART_UNKNOWN_FORMAT": FirstPartFormatError,
    "SECOND_PART_UNKNOWN_FORMAT": SecondPartFormatError,
    "SUM_CONTROL_MISMATCH": SumControlMismatchError,
}
