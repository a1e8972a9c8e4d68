"""
Main validation engine — orchestrates the full workflow.

Flow:
  ┌───────────┐
  │ Raw string│
  └─────┬─────┘
        │
  ┌─────▼─────┐
  │  Parser   │   ← 2 or 3 parts, stored verbatim
  └─────┬─────┘
        │
  ┌─────▼─────┐
  │ Structure │   ← area code, then register number
  └─────┬─────┘
        │
  ┌─────▼─────┐
  │ Check     │   ← optional, weighted modulo 10
  │ digit     │
  └─────┬─────┘
        │
  ┌─────▼─────┐
  │  Report   │   ← Typed findings + pass/fail
  └───────────┘

Design principles:
  - Settings are fixed at construction; no method depends on another having
    been called first.
  - Parse errors are raised by parse(); run() turns them into findings.
  - Nothing is cached on the number itself. resolve() returns a new one.
"""

from __future__ import annotations

import logging
from typing import Optional

from . import checksum
from .config import ValidationSettings
from .exceptions import VALIDATION_ERRORS_BY_CODE, EkwParseError
from .models import EkwNumber, Severity, ValidationFinding, ValidationReport
from .parser import parse_ekw
from .validators import validate_number, validate_structure

logger = logging.getLogger(__name__)


class EkwValidator:
    """Parses and validates EKW numbers with a fixed set of settings.

    Usage:
        validator = EkwValidator(ValidationSettings(verify_checksum=True))
        report = validator.run("PR1J/00104856/8")
        if not report.is_valid:
            for finding in report.findings:
                print(finding)
    """

    def __init__(self, settings: ValidationSettings | None = None):
        self.settings = settings or ValidationSettings()

    def parse(self, raw: str) -> EkwNumber:
        return parse_ekw(raw)

    def validate(self, number: EkwNumber) -> list[ValidationFinding]:
        return validate_number(number, self.settings)

    def check_digit(self, number: EkwNumber) -> Optional[str]:
        """Check digit for the number, or None when it cannot be computed.

        With require_validation, structurally invalid numbers always give None.
        """
        if self.settings.require_validation and validate_structure(number):
            return None
        return checksum.check_digit_for(number)

    def register_number(self, number: EkwNumber) -> Optional[str]:
        """The register number, but only for a structurally valid EKW number."""
        if validate_structure(number):
            return None
        return number.register_number

    def resolve(self, number: EkwNumber) -> EkwNumber:
        if self.settings.require_validation and validate_structure(number):
            return number
        return checksum.resolve(number)

    def ensure_valid(self, number: EkwNumber) -> EkwNumber:
        """Return the number, or raise the error matching its first ERROR finding."""
        for finding in self.validate(number):
            if finding.severity == Severity.ERROR:
                raise VALIDATION_ERRORS_BY_CODE[finding.code](finding.message, finding.details)
        return number

    def run(self, raw: str) -> ValidationReport:
        """Execute the full workflow on a raw EKW string.

        Args:
            raw: The raw EKW number, e.g. "PR1J/00104856/8".

        Returns:
            ValidationReport with findings and pass/fail verdict.
        """
        # ── Step 1: Parse ───────────────────────────────────────────
        logger.info("Parsing %r", raw)
        try:
            number = self.parse(raw)
        except EkwParseError as exc:
            logger.info("Parse failed: %s", exc)
            return ValidationReport(
                raw=raw,
                is_valid=False,
                findings=[
                    ValidationFinding(
                        severity=Severity.ERROR,
                        code=exc.code,
                        field="raw",
                        message=str(exc),
                        details=exc.details,
                    )
                ],
                settings=self.settings,
            )

        # ── Step 2: Validate ────────────────────────────────────────
        logger.info("Validating %s", number)
        findings = self.validate(number)

        # ── Step 3: Check digit, only for a well-formed number ──────
        computed = None if validate_structure(number) else self.check_digit(number)

        # ── Step 4: Compile final report ────────────────────────────
        has_errors = any(f.severity == Severity.ERROR for f in findings)
        return ValidationReport(
            raw=raw,
            is_valid=not has_errors,
            findings=findings,
            number=number,
            computed_check_digit=computed,
            settings=self.settings,
        )
