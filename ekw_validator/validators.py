"""
Deterministic validation engine for parsed EKW numbers.

Each validator function:
  - Takes an EkwNumber
  - Returns a list of ValidationFinding objects (empty = all clear)
  - Is independently testable

validate_number() runs them in order and stops at the first one that
reports anything, so a malformed area code is never followed by a check-digit
computation on garbage.
"""

from __future__ import annotations

import logging
import re

from .checksum import check_digit_for
from .config import ValidationSettings
from .models import EkwNumber, Severity, ValidationFinding

logger = logging.getLogger(__name__)


# ─── Constants ───────────────────────────────────────────────────────

AREA_CODE_PATTERN = re.compile(r"[A-Za-z]{2}[0-9][A-Za-z]")
REGISTER_NUMBER_PATTERN = re.compile(r"[0-9]{8}")


# ─── Orchestrator ────────────────────────────────────────────────────


def validate_number(
    number: EkwNumber, settings: ValidationSettings | None = None
) -> list[ValidationFinding]:
    """Run the structural checks, then the optional check-digit comparison."""
    settings = settings or ValidationSettings()

    findings = validate_structure(number)
    if findings:
        return findings

    if settings.verify_checksum:
        return validate_check_digit(number, strict=settings.strict_checksum)
    return []


def validate_structure(number: EkwNumber) -> list[ValidationFinding]:
    """Area code first, register number second; the first failure wins."""
    return validate_area_code(number) or validate_register_number(number)


# ─── Individual Validators ───────────────────────────────────────────


def validate_area_code(number: EkwNumber) -> list[ValidationFinding]:
    """The area code identifies the registry office: e.g. PR1J (letters, digit, letter)."""
    if AREA_CODE_PATTERN.fullmatch(number.area_code):
        return []

    return [
        ValidationFinding(
            severity=Severity.ERROR,
            code="FIRST_PART_UNKNOWN_FORMAT",
            field="area_code",
            message=(
                f"Area code '{number.area_code}' is not two letters, one digit "
                f"and one letter (e.g. PR1J)."
            ),
            details={"area_code": number.area_code},
        )
    ]


def validate_register_number(number: EkwNumber) -> list[ValidationFinding]:
    """The register number is exactly eight digits, zero-padded."""
    if REGISTER_NUMBER_PATTERN.fullmatch(number.register_number):
        return []

    return [
        ValidationFinding(
            severity=Severity.ERROR,
            code="SECOND_PART_UNKNOWN_FORMAT",
            field="register_number",
            message=(
                f"Register number '{number.register_number}' is not exactly "
                f"eight digits."
            ),
            details={
                "register_number": number.register_number,
                "length": len(number.register_number),
            },
        )
    ]


def validate_check_digit(
    number: EkwNumber, strict: bool = False
) -> list[ValidationFinding]:
    """Compare the supplied check digit against the computed one.

    A missing check digit is fine — it is optional. A wrong one is reported
    as a WARNING unless strict: the digit alone may carry the typo while the
    rest of the number is sound.
    """
    if number.check_digit is None:
        return []

    expected = check_digit_for(number)
    if expected == number.check_digit:
        return []

    logger.warning(
        "Check digit mismatch for %s: expected %s, got %s",
        number,
        expected,
        number.check_digit,
    )
    if expected is None:
        message = (
            f"Check digit '{number.check_digit}' cannot be verified: "
            f"'{number.area_code}{number.register_number}' contains characters "
            f"outside the registry alphabet."
        )
    else:
        message = (
            f"Check digit '{number.check_digit}' does not match the computed "
            f"check digit '{expected}'."
        )

    return [
        ValidationFinding(
            severity=Severity.ERROR if strict else Severity.WARNING,
            code="SUM_CONTROL_MISMATCH",
            field="check_digit",
            message=message,
            details={"supplied": number.check_digit, "expected": expected},
        )
    ]
