"""
Reductions — Свёртки последовательностей чисел

Модуль реализует left fold над последовательностью:
- Первый элемент становится accumulator (0 для пустой последовательности)
- Остальные элементы применяются слева направо оператором (+, -, *, /)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Входная последовательность не изменяется (копируется до свёртки)
2. Все элементы, включая seed, проходят валидацию is_numeric
3. add/subtract/multiply сохраняют int, если все входы int
4. divide всегда возвращает float (true division)
5. divide на точный ноль (0 или 0.0) после seed → DivisionByZero

ФОРМУЛЫ:
    add([x0, x1, ..., xn])      = x0 + x1 + ... + xn
    subtract([x0, x1, ..., xn]) = x0 - x1 - ... - xn
    multiply([x0, x1, ..., xn]) = x0 * x1 * ... * xn
    divide([x0, x1, ..., xn])   = x0 / x1 / ... / xn
    average(xs)                 = add(xs) / len(xs), 0 для пустой
"""

import logging
from collections.abc import Iterable

from numops.errors import DivisionByZero
from numops.math.numerical_safeguards import Numeric, validate_numeric_sequence

log = logging.getLogger("numops.math.reductions")


# =============================================================================
# REDUCTIONS
# =============================================================================


def add(numbers: Iterable[Numeric]) -> Numeric:
    """
    Сумма последовательности чисел.

    Args:
        numbers: Iterable из int/float

    Returns:
        Сумма (int, если все элементы int)

    Raises:
        InvalidArgument: Если какой-либо элемент не число

    Examples:
        >>> add([])
        0
        >>> add([1, 2, 3])
        6
    """
    items = validate_numeric_sequence(numbers)
    if not items:
        return 0

    result = items[0]
    for number in items[1:]:
        result += number

    return result


def subtract(numbers: Iterable[Numeric]) -> Numeric:
    """
    Последовательное вычитание из первого элемента.

    Examples:
        >>> subtract([10, 3, 2])
        5
    """
    items = validate_numeric_sequence(numbers)
    if not items:
        return 0

    result = items[0]
    for number in items[1:]:
        result -= number

    return result


def multiply(numbers: Iterable[Numeric]) -> Numeric:
    """
    Произведение последовательности чисел.

    Пустая последовательность даёт 0 (seed по умолчанию), а не 1.

    Examples:
        >>> multiply([2, 3, 4])
        24
    """
    items = validate_numeric_sequence(numbers)
    if not items:
        return 0

    result = items[0]
    for number in items[1:]:
        result *= number

    return result


def divide(numbers: Iterable[Numeric]) -> float:
    """
    Последовательное деление первого элемента на остальные.

    Проверка на ноль выполняется до начала свёртки, поэтому ошибка
    не зависит от позиции нуля.

    Args:
        numbers: Iterable из int/float

    Returns:
        Результат деления (float); для пустой последовательности 0.0,
        для одного элемента float(seed)

    Raises:
        InvalidArgument: Если какой-либо элемент не число
        DivisionByZero: Если любой элемент после первого равен 0

    Examples:
        >>> divide([10, 2])
        5.0
        >>> divide([100, 5, 2])
        10.0
    """
    items = validate_numeric_sequence(numbers)
    if not items:
        return 0.0

    for index, number in enumerate(items[1:], start=1):
        if number == 0:
            log.debug("division by zero at index %d", index)
            raise DivisionByZero(f"Cannot divide by zero (element at index {index})")

    result = items[0]
    for number in items[1:]:
        result /= number

    return float(result)


def average(numbers: Iterable[Numeric]) -> Numeric:
    """
    Среднее арифметическое.

    Fail-safe: пустая последовательность возвращает 0, а не ошибку.

    Returns:
        0 для пустой последовательности, иначе add(numbers) / len(numbers)

    Raises:
        InvalidArgument: Если какой-либо элемент не число

    Examples:
        >>> average([])
        0
        >>> average([2, 4, 6])
        4.0
    """
    items = validate_numeric_sequence(numbers)
    if not items:
        return 0

    return add(items) / len(items)
