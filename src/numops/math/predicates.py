"""
Predicates — Проверки чётности и простоты

Все проверки принимают только int (bool и float отклоняются).

is_prime использует trial division: делители от 2 до floor(sqrt(n))
включительно. floor(sqrt(n)) вычисляется через math.isqrt, что точно
для любых int (без ошибок float для больших n).
"""

import math

from numops.math.numerical_safeguards import validate_integer


def is_even(number: int) -> bool:
    """
    Проверка на чётность.

    Examples:
        >>> is_even(4)
        True
        >>> is_even(-3)
        False
    """
    validate_integer(number, "number")
    return number % 2 == 0


def is_odd(number: int) -> bool:
    """Проверка на нечётность."""
    validate_integer(number, "number")
    return number % 2 != 0


def is_prime(number: int) -> bool:
    """
    Проверка на простое число.

    Args:
        number: Проверяемое целое

    Returns:
        False для number <= 1, иначе True если ни один делитель
        в [2, isqrt(number)] не делит number нацело

    Raises:
        InvalidArgument: Если number не int

    Examples:
        >>> is_prime(1)
        False
        >>> is_prime(97)
        True
        >>> is_prime(100)
        False
    """
    validate_integer(number, "number")

    if number <= 1:
        return False

    for divisor in range(2, math.isqrt(number) + 1):
        if number % divisor == 0:
            return False

    return True
