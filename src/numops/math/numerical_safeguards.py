"""
Numerical Safeguards — Проверки числовых типов

Модуль обеспечивает единые правила для всех операций numops:
- Что считается числом (Numeric = int | float, bool НЕ число)
- Валидация отдельных значений и последовательностей
- Валидация целых чисел для проверок чётности/простоты

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. bool никогда не принимается как число (хотя bool subclass int)
2. Валидация не изменяет входные данные
3. Ошибка валидации всегда InvalidArgument с именем параметра в сообщении
"""

import logging
import math
from collections.abc import Iterable
from numbers import Real
from typing import Any, Union

from numops.errors import InvalidArgument

log = logging.getLogger("numops.math.numerical_safeguards")

# Числовой тип библиотеки: tagged union int | float
Numeric = Union[int, float]


# =============================================================================
# ПРЕДИКАТЫ ТИПОВ
# =============================================================================


def is_numeric(value: Any) -> bool:
    """
    Проверка, является ли значение числом.

    Принимаются int, float и прочие numbers.Real (например Fraction).
    bool отклоняется явно.

    Examples:
        >>> is_numeric(5)
        True
        >>> is_numeric(2.5)
        True
        >>> is_numeric(True)
        False
        >>> is_numeric("5")
        False
    """
    return isinstance(value, Real) and not isinstance(value, bool)


def is_valid_float(value: float) -> bool:
    """
    Конечно ли значение.

    round_half_away, ceil и floor пропускают NaN/Inf без изменений,
    to_int отклоняет их: целого представления у них нет.
    """
    return math.isfinite(value)


def float_or_inf(value: Any) -> float:
    """
    Конверсия числа в float с переполнением в inf.

    int и Fraction вне диапазона float дают inf со знаком значения
    вместо OverflowError (float(10**400) == inf).

    Examples:
        >>> float_or_inf(3)
        3.0
        >>> float_or_inf(-(10**400))
        -inf
    """
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def is_integer(value: Any) -> bool:
    """Проверка на int (bool и float с целым значением отклоняются)."""
    return isinstance(value, int) and not isinstance(value, bool)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_numeric(value: Any, name: str) -> None:
    """
    Валидация, что значение является числом.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        InvalidArgument: Если value не число
    """
    if not is_numeric(value):
        log.debug("rejected non-numeric %s=%r", name, value)
        raise InvalidArgument(
            f"{name} must be a number, got {type(value).__name__}: {value!r}"
        )


def validate_integer(value: Any, name: str) -> None:
    """
    Валидация, что значение является int.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        InvalidArgument: Если value не int (включая bool и float)
    """
    if not is_integer(value):
        log.debug("rejected non-integer %s=%r", name, value)
        raise InvalidArgument(
            f"{name} must be an integer, got {type(value).__name__}: {value!r}"
        )


def validate_numeric_sequence(values: Iterable[Any], name: str = "numbers") -> list:
    """
    Валидация последовательности чисел.

    Последовательность материализуется в новый список: исходный объект
    вызывающего кода не изменяется, генераторы потребляются один раз.

    Args:
        values: Iterable значений
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        Новый список с теми же элементами

    Raises:
        InvalidArgument: Если values не iterable или содержит не-число
    """
    if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        log.debug("rejected non-iterable %s=%r", name, values)
        raise InvalidArgument(
            f"{name} must be an iterable of numbers, got {type(values).__name__}"
        )

    items = list(values)

    for index, value in enumerate(items):
        if not is_numeric(value):
            log.debug("rejected %s[%d]=%r", name, index, value)
            raise InvalidArgument(
                f"All elements of {name} must be numbers, "
                f"got {type(value).__name__} at index {index}: {value!r}"
            )

    return items
