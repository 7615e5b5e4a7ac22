"""
numops — статическая библиотека числовых операций

Свёртки над последовательностями, скалярная арифметика, конверсии,
проверки чётности/простоты и генерация диапазонов.
"""

from numops.domain import RangeSpec
from numops.errors import DivisionByZero, InvalidArgument, NumberOpsError
from numops.math import (
    DEFAULT_ROUND_PRECISION,
    MAX_RANGE_LENGTH,
    Numeric,
    add,
    average,
    ceil,
    divide,
    floor,
    is_even,
    is_numeric,
    is_odd,
    is_prime,
    modulus,
    multiply,
    number_range,
    power,
    range_length,
    round_half_away,
    subtract,
    to_array,
    to_float,
    to_int,
    to_string,
)
from numops.number_ops import NumberOps

__version__ = "0.1.0"

__all__ = [
    # Facade
    "NumberOps",
    # Errors
    "DivisionByZero",
    "InvalidArgument",
    "NumberOpsError",
    # Types
    "Numeric",
    "RangeSpec",
    # Constants
    "DEFAULT_ROUND_PRECISION",
    "MAX_RANGE_LENGTH",
    # Operations
    "add",
    "average",
    "ceil",
    "divide",
    "floor",
    "is_even",
    "is_numeric",
    "is_odd",
    "is_prime",
    "modulus",
    "multiply",
    "number_range",
    "power",
    "range_length",
    "round_half_away",
    "subtract",
    "to_array",
    "to_float",
    "to_int",
    "to_string",
]
