"""
Conversions — Конверсии числовых значений

to_string / to_int / to_float / to_array.
to_int усекает к нулю (to_int(-2.7) == -2).
"""

import logging

from numops.errors import InvalidArgument
from numops.math.numerical_safeguards import (
    Numeric,
    float_or_inf,
    is_integer,
    is_valid_float,
    validate_numeric,
)

log = logging.getLogger("numops.math.conversions")


def to_string(number: Numeric) -> str:
    """Строковое представление числа (to_string(2.0) == "2.0")."""
    validate_numeric(number, "number")
    return str(number)


def to_int(number: Numeric) -> int:
    """
    Конверсия в int с усечением к нулю.

    Raises:
        InvalidArgument: Если number не число или NaN/Inf
    """
    validate_numeric(number, "number")

    if is_integer(number):
        return number

    if isinstance(number, float) and not is_valid_float(number):
        log.debug("cannot convert non-finite %r to int", number)
        raise InvalidArgument(f"Cannot convert {number!r} to an integer")

    return int(number)


def to_float(number: Numeric) -> float:
    """Конверсия в float; int вне диапазона float даёт inf со знаком."""
    validate_numeric(number, "number")
    return float_or_inf(number)


def to_array(number: Numeric) -> list:
    """Новый список из одного элемента: [number]."""
    validate_numeric(number, "number")
    return [number]
