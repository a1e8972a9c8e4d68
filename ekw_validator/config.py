"""
Validation settings, chosen once when the engine is constructed.

Every behaviour that differed between historical EKW implementations is a
named switch here instead of hidden coupling between methods.
"""

from __future__ import annotations

import os

from pydantic import BaseModel

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


class ValidationSettings(BaseModel):
    """How strictly an EKW number is checked.

    Attributes:
        verify_checksum: Compare a supplied check digit against the computed
            one during validation. Without it, a supplied digit is stored but
            never judged.
        require_validation: Refuse to produce a check digit (return None)
            for numbers that fail structural validation.
        strict_checksum: Report a check-digit mismatch as an ERROR instead of
            a WARNING.
    """

    model_config = {"frozen": True}

    verify_checksum: bool = False
    require_validation: bool = False
    strict_checksum: bool = False

    @classmethod
    def from_env(cls) -> ValidationSettings:
        """Build settings from EKW_VERIFY_CHECKSUM, EKW_REQUIRE_VALIDATION and EKW_STRICT_CHECKSUM."""
        return cls(
            verify_checksum=_env_flag("EKW_VERIFY_CHECKSUM"),
            require_validation=_env_flag("EKW_REQUIRE_VALIDATION"),
            strict_checksum=_env_flag("EKW_STRICT_CHECKSUM"),
        )
