"""
Splits a raw EKW string into its parts.

The parser only checks the SHAPE (how many parts there are). What each part
contains is the validators' job, so every part is stored exactly as written.
"""

from __future__ import annotations

import logging

from .exceptions import IncompleteNumberError, UnsupportedFormatError
from .models import PARTS_SEPARATOR, EkwNumber

logger = logging.getLogger(__name__)


def parse_ekw(raw: str) -> EkwNumber:
    """Parse 'geo/lam' or 'geo/lam/sum' into an EkwNumber.

    Args:
        raw: The raw EKW number, e.g. "PR1J/00104856/8".

    Returns:
        EkwNumber with the parts stored verbatim. A third part becomes an
        untrusted check digit.

    Raises:
        IncompleteNumberError: only one part was given.
        UnsupportedFormatError: more than three parts were given.
    """
    parts = raw.split(PARTS_SEPARATOR)

    if len(parts) == 1:
        raise IncompleteNumberError(
            f"Incomplete EKW number {raw!r}: the register number is missing.",
            details={"raw": raw, "parts": len(parts)},
        )
    if len(parts) > 3:
        raise UnsupportedFormatError(
            f"Unsupported EKW format {raw!r}: expected 2 or 3 parts, got {len(parts)}.",
            details={"raw": raw, "parts": len(parts)},
        )

    check_digit = parts[2] if len(parts) == 3 else None
    logger.debug("Parsed %r into %d parts", raw, len(parts))
    return EkwNumber(
        area_code=parts[0],
        register_number=parts[1],
        check_digit=check_digit,
    )
