"""
Domain models and value objects.

Contains the BigInt value type and its mutable binding BigIntCell.
"""

from src.core.domain.bigint import (
    SIGN_DISPATCH,
    ArithmeticOp,
    BigInt,
    MagnitudeRoute,
)
from src.core.domain.cell import BigIntCell
from src.core.math.digits import InvalidFormatError

__all__ = [
    # BigInt model
    "BigInt",
    "InvalidFormatError",
    # Sign dispatch
    "ArithmeticOp",
    "MagnitudeRoute",
    "SIGN_DISPATCH",
    # Mutable binding
    "BigIntCell",
]
