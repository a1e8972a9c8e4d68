#!/usr/bin/env python3
"""
EKW Validator — Entry Point
===========================

Validates a single EKW number and prints a report.

Usage:
    python main.py                              # Sample number PR1J/00104856/8
    python main.py PR1L/00022370                # Any number
    EKW_VERIFY_CHECKSUM=1 python main.py PR1J/00104856/1

Settings come from the environment (or a .env file):
    EKW_VERIFY_CHECKSUM     compare the supplied check digit
    EKW_STRICT_CHECKSUM     treat a wrong check digit as an error
    EKW_REQUIRE_VALIDATION  no check digit for malformed numbers
    EKW_LOG_LEVEL           logging level (default WARNING)
"""

from __future__ import annotations

import logging
import os
import sys

from dotenv import load_dotenv

from ekw_validator.config import ValidationSettings
from ekw_validator.models import Severity
from ekw_validator.pipeline import EkwValidator

# ─── Load .env if present ────────────────────────────────────────────
load_dotenv()


SAMPLE_EKW = "PR1J/00104856/8"


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_YELLOW = "\033[93m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 72


# ─── Pretty Printer Helpers ─────────────────────────────────────────


def _print_number_details(report) -> None:
    """Print the parsed parts and the computed check digit."""
    number = report.number
    print(f"  Area code:   {number.area_code}")
    print(f"  Register:    {number.register_number}")
    supplied = number.check_digit if number.check_digit is not None else f"{_DIM}(none){_RESET}"
    print(f"  Supplied:    {supplied}")
    computed = report.computed_check_digit
    print(f"  Computed:    {computed if computed is not None else f'{_DIM}(unavailable){_RESET}'}")


def _print_findings_group(findings, color: str, label: str) -> None:
    """Print a categorized group of findings (errors or warnings)."""
    if not findings:
        return
    print(f"\n  {color}{_BOLD}{label} ({len(findings)}){_RESET}")
    for f in findings:
        print(f"    {color}[{f.code}]{_RESET}")
        print(f"    {f.message}")
        for k, v in f.details.items():
            print(f"      {_DIM}{k}: {v}{_RESET}")
        print()


# ─── Pretty Printer ─────────────────────────────────────────────────


def print_report(report) -> int:
    """Pretty-print the validation report with ANSI color codes.

    Returns:
        0 if the number passed, 1 if rejected.
    """
    settings = report.settings
    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  EKW VALIDATION REPORT{_RESET}")
    print(f"{'=' * _WIDTH}")
    print(f"  Input:       {report.raw}")
    print(
        f"  Settings:    {_DIM}verify={settings.verify_checksum} "
        f"strict={settings.strict_checksum} "
        f"require_validation={settings.require_validation}{_RESET}"
    )
    print(f"{'─' * _WIDTH}")

    if report.number is not None:
        _print_number_details(report)

    print(f"{'─' * _WIDTH}")

    errors = [f for f in report.findings if f.severity == Severity.ERROR]
    warnings = [f for f in report.findings if f.severity == Severity.WARNING]

    _print_findings_group(errors, _RED, "ERRORS")
    _print_findings_group(warnings, _YELLOW, "WARNINGS")

    print(f"{'=' * _WIDTH}")
    if report.is_valid:
        print(f"  {_GREEN}{_BOLD}EKW NUMBER PASSED ALL CHECKS{_RESET}")
    else:
        print(f"  {_RED}{_BOLD}EKW NUMBER REJECTED  --  {len(errors)} error(s) found{_RESET}")
    print(f"{'=' * _WIDTH}\n")

    return 0 if report.is_valid else 1


# ─── Main ────────────────────────────────────────────────────────────


def _log_level(name: str | None) -> int:
    """Map a level name like 'debug' to its number; unknown names fall back to WARNING."""
    level = getattr(logging, (name or "").strip().upper(), None)
    return level if isinstance(level, int) else logging.WARNING


def main(argv: list[str] | None = None) -> int:
    """Validate the number given on the command line and print the report."""
    argv = sys.argv[1:] if argv is None else argv
    logging.basicConfig(
        level=_log_level(os.getenv("EKW_LOG_LEVEL")),
        format="%(levelname)s %(name)s: %(message)s",
    )

    raw = argv[0] if argv else SAMPLE_EKW
    validator = EkwValidator(ValidationSettings.from_env())
    report = validator.run(raw)
    return print_report(report)


if __name__ == "__main__":
    sys.exit(main())
