"""
Math modules для numops

Числовые примитивы: свёртки, скалярные операции, конверсии,
предикаты и генерация диапазонов.
"""

# Numerical Safeguards
from numops.math.numerical_safeguards import (
    Numeric,
    float_or_inf,
    is_integer,
    is_numeric,
    is_valid_float,
    validate_integer,
    validate_numeric,
    validate_numeric_sequence,
)

# Reductions
from numops.math.reductions import (
    add,
    average,
    divide,
    multiply,
    subtract,
)

# Scalar Operations
from numops.math.scalar_ops import (
    DEFAULT_ROUND_PRECISION,
    ceil,
    floor,
    modulus,
    power,
    round_half_away,
)

# Conversions
from numops.math.conversions import (
    to_array,
    to_float,
    to_int,
    to_string,
)

# Predicates
from numops.math.predicates import (
    is_even,
    is_odd,
    is_prime,
)

# Sequences
from numops.math.sequences import (
    MAX_RANGE_LENGTH,
    number_range,
    range_length,
)

__all__ = [
    # Numerical Safeguards
    "Numeric",
    "float_or_inf",
    "is_integer",
    "is_numeric",
    "is_valid_float",
    "validate_integer",
    "validate_numeric",
    "validate_numeric_sequence",
    # Reductions
    "add",
    "average",
    "divide",
    "multiply",
    "subtract",
    # Scalar Operations
    "DEFAULT_ROUND_PRECISION",
    "ceil",
    "floor",
    "modulus",
    "power",
    "round_half_away",
    # Conversions
    "to_array",
    "to_float",
    "to_int",
    "to_string",
    # Predicates
    "is_even",
    "is_odd",
    "is_prime",
    # Sequences
    "MAX_RANGE_LENGTH",
    "number_range",
    "range_length",
]
