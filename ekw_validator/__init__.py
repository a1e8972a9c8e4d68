"""
EKW Validator — parsing and check-digit verification for land registry numbers.

Architecture: Parser → Structural validation → Check-digit verification → Report
Philosophy:  Store what was written. Compute what can be proven.
"""

__version__ = "1.0.0"
