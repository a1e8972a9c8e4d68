"""
Weighted modulo-10 check digit for EKW numbers.

Algorithm:
  1. Concatenate area code + register number (12 characters), upper-cased.
  2. Map every character through CHAR_VALUES (digits are themselves,
     X=10, A=11 ... Z=33; Q and V do not exist in the registry alphabet).
  3. Multiply each value by its weight from WEIGHTS (1, 3, 7 repeating).
  4. Sum the products; the check digit is the sum modulo 10.

This detects transcription slips. It is not a digest: collisions are normal.
Malformed input never raises — the result is simply None.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping, Optional

from .models import EkwNumber

logger = logging.getLogger(__name__)


# ─── Constants ───────────────────────────────────────────────────────

ALPHABET = "0123456789XABCDEFGHIJKLMNOPRSTUWYZ"

CHAR_VALUES: Mapping[str, int] = MappingProxyType(
    {char: value for value, char in enumerate(ALPHABET)}
)

WEIGHTS: tuple[int, ...] = (1, 3, 7) * 4


# ─── Public API ──────────────────────────────────────────────────────


def compute_check_digit(area_code: str, register_number: str) -> Optional[str]:
    """Compute the check digit for the given parts.

    Returns:
        A single decimal digit as a string, or None when a character has no
        registry value or the parts do not add up to 12 characters.
    """
    values: list[int] = []
    for char in area_code + register_number:
        value = CHAR_VALUES.get(char.upper())
        if value is None:
            logger.debug("Cannot encode %r in %r", char, area_code + register_number)
            return None
        values.append(value)

    if len(values) != len(WEIGHTS):
        logger.debug(
            "Expected %d encodable characters, got %d", len(WEIGHTS), len(values)
        )
        return None

    total = sum(value * weight for value, weight in zip(values, WEIGHTS))
    return str(total % 10)


def check_digit_for(number: EkwNumber) -> Optional[str]:
    """Return the trusted check digit unchanged, otherwise compute it.

    A digit read from input is never returned here: it is what we compare
    AGAINST, not the answer.
    """
    if number.check_digit_trusted and number.check_digit is not None:
        return number.check_digit
    return compute_check_digit(number.area_code, number.register_number)


def resolve(number: EkwNumber) -> EkwNumber:
    """Return a copy carrying the computed check digit, marked trusted.

    A supplied digit is overwritten without notice, even a wrong one; run
    validate_check_digit() first when the supplied digit matters.
    Already-trusted numbers and numbers whose digit cannot be computed are
    returned unchanged.
    """
    if number.check_digit_trusted and number.check_digit is not None:
        return number
    digit = compute_check_digit(number.area_code, number.register_number)
    if digit is None:
        return number
    return number.model_copy(update={"check_digit": digit, "check_digit_trusted": True})
