"""
Domain value objects built on top of the fixed-point math.

Contains Difference (signed comparison of two decimals) and its representation.
"""

from src.core.domain.difference import (
    NOT_AVAILABLE,
    Difference,
    DifferenceRepresentation,
    Sign,
)

__all__ = [
    "NOT_AVAILABLE",
    "Difference",
    "DifferenceRepresentation",
    "Sign",
]
