"""
Scalar Operations — Операции над отдельными числами

Модуль реализует:
- modulus: остаток от деления (семантика Python %, знак делителя)
- power: возведение в степень с IEEE-754 поведением для float
- round_half_away: округление half-away-from-zero до precision знаков
- ceil/floor: округление вверх/вниз, результат всегда float

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. modulus на точный ноль → DivisionByZero
2. power никогда не поднимает исключение и никогда не возвращает complex
3. round_half_away работает на кратчайшем десятичном представлении float,
   поэтому round_half_away(1.005, 2) == 1.01
4. NaN/Inf проходят через round/ceil/floor без изменений
5. int вне диапазона float даёт inf со знаком, а не OverflowError
"""

import logging
import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Final

from numops.errors import DivisionByZero
from numops.math.numerical_safeguards import (
    Numeric,
    float_or_inf,
    is_integer,
    is_valid_float,
    validate_integer,
    validate_numeric,
)

log = logging.getLogger("numops.math.scalar_ops")

# Количество десятичных знаков по умолчанию для round_half_away
DEFAULT_ROUND_PRECISION: Final[int] = 0

# 2**-1100 меньше наименьшего subnormal float (2**-1074)
_UNDERFLOW_BITS: Final[int] = 1100


# =============================================================================
# MODULUS / POWER
# =============================================================================


def modulus(number: Numeric, divisor: Numeric) -> Numeric:
    """
    Остаток от деления number на divisor.

    Используется Python %: результат имеет знак делителя
    (modulus(-7, 3) == 2), float поддерживаются.

    Args:
        number: Делимое
        divisor: Делитель

    Returns:
        number % divisor

    Raises:
        InvalidArgument: Если аргумент не число
        DivisionByZero: Если divisor == 0

    Examples:
        >>> modulus(10, 3)
        1
        >>> modulus(7.5, 2)
        1.5
    """
    validate_numeric(number, "number")
    validate_numeric(divisor, "divisor")

    if divisor == 0:
        log.debug("modulus by zero: number=%r", number)
        raise DivisionByZero("Cannot divide by zero!")

    return number % divisor


def power(base: Numeric, exponent: Numeric) -> Numeric:
    """
    Возведение base в степень exponent.

    Если оба аргумента int и exponent >= 0, результат точный int.
    Иначе результат float по правилам IEEE-754:
    - отрицательное основание с дробной степенью → nan
    - нулевое основание с отрицательной степенью → inf
      (-inf для -0.0 и нечётной целой степени)
    - переполнение → inf (со знаком для нечётной целой степени)
    - int с отрицательной int степенью считается как 1 / base**n,
      поэтому power(10**400, -1) == 0.0, а не inf

    Examples:
        >>> power(2, 10)
        1024
        >>> power(2, -1)
        0.5
        >>> power(-8, 1 / 3)
        nan
    """
    validate_numeric(base, "base")
    validate_numeric(exponent, "exponent")

    if is_integer(base) and is_integer(exponent):
        if exponent >= 0:
            return base**exponent
        return _int_reciprocal_power(base, -exponent)

    # Аргументы вне диапазона float уже здесь становятся inf,
    # поэтому OverflowError ниже означает только переполнение результата
    x = float_or_inf(base)
    y = float_or_inf(exponent)

    try:
        return math.pow(x, y)
    except ValueError:
        # math domain error
        if x == 0:
            if _is_odd_integral(y):
                return math.copysign(math.inf, x)
            return math.inf
        return math.nan
    except OverflowError:
        if x < 0 and _is_odd_integral(y):
            return -math.inf
        return math.inf


def _int_reciprocal_power(base: int, n: int) -> float:
    """1 / base**n для int base и n > 0, с корректным underflow в 0.0."""
    if base == 0:
        return math.inf

    magnitude = abs(base)

    if magnitude == 1:
        result = 1.0
    elif (magnitude.bit_length() - 1) * n >= _UNDERFLOW_BITS:
        # magnitude**n >= 2**_UNDERFLOW_BITS: результат ниже subnormal
        result = 0.0
    else:
        result = 1 / magnitude**n

    if base < 0 and n % 2 == 1:
        return -result
    return result


def _is_odd_integral(value: float) -> bool:
    return value.is_integer() and int(value) % 2 == 1


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def round_half_away(number: Numeric, precision: int = DEFAULT_ROUND_PRECISION) -> float:
    """
    Округление до precision десятичных знаков, half-away-from-zero.

    В отличие от builtin round (banker's rounding, бинарное представление),
    половина всегда округляется от нуля, а float берётся в его кратчайшем
    десятичном виде (repr).

    Отрицательный precision округляет до десятков, сотен и т.д.

    Args:
        number: Значение для округления
        precision: Количество десятичных знаков (default: 0)

    Returns:
        Округлённое значение (всегда float)

    Raises:
        InvalidArgument: Если number не число или precision не int

    Examples:
        >>> round_half_away(3.14159, 2)
        3.14
        >>> round_half_away(2.5)
        3.0
        >>> round_half_away(-2.5)
        -3.0
        >>> round_half_away(1250, -2)
        1300.0
    """
    validate_numeric(number, "number")
    validate_integer(precision, "precision")

    if is_integer(number):
        value = Decimal(number)
    else:
        as_float = float_or_inf(number)
        if not is_valid_float(as_float):
            return as_float
        value = Decimal(repr(as_float))

    # Уже не больше precision знаков: округлять нечего
    if value.as_tuple().exponent >= -precision:
        return float(value)

    quantum = Decimal(1).scaleb(-precision)

    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(value.as_tuple().digits) + 2)
        rounded = value.quantize(quantum, rounding=ROUND_HALF_UP)

    return float(rounded)


def ceil(number: Numeric) -> float:
    """
    Наименьшее целое >= number, в виде float.

    Examples:
        >>> ceil(2.1)
        3.0
        >>> ceil(-2.1)
        -2.0
    """
    validate_numeric(number, "number")

    value = float_or_inf(number)
    if is_integer(number) or not is_valid_float(value):
        return value

    return float(math.ceil(number))


def floor(number: Numeric) -> float:
    """
    Наибольшее целое <= number, в виде float.

    Examples:
        >>> floor(2.9)
        2.0
        >>> floor(-2.1)
        -3.0
    """
    validate_numeric(number, "number")

    value = float_or_inf(number)
    if is_integer(number) or not is_valid_float(value):
        return value

    return float(math.floor(number))
