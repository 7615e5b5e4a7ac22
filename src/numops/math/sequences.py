"""
Sequences — Генерация числовых диапазонов

number_range(start, end, step) строит список start, start + step, ...
не выходящий за end (включительно), с учётом направления step.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. step == 0 → InvalidArgument
2. Длина вычисляется до аллокации; длина > max_length → InvalidArgument
3. Элементы float вычисляются как start + i * step (без накопления ошибки)
4. Несовпадение направления step с end - start → пустой список
"""

import logging
from typing import Final, Union

from pydantic import ValidationError

from numops.domain.range_spec import RangeSpec
from numops.errors import InvalidArgument

log = logging.getLogger("numops.math.sequences")

# Максимальная длина материализуемого диапазона
MAX_RANGE_LENGTH: Final[int] = 10_000_000


def _build_spec(
    start: Union[int, float], end: Union[int, float], step: Union[int, float]
) -> RangeSpec:
    try:
        return RangeSpec(start=start, end=end, step=step)
    except ValidationError as e:
        reason = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in e.errors()
        )
        log.debug("rejected range start=%r end=%r step=%r: %s", start, end, step, reason)
        raise InvalidArgument(f"Invalid range arguments: {reason}") from e


def range_length(
    start: Union[int, float], end: Union[int, float], step: Union[int, float] = 1
) -> int:
    """
    Количество элементов number_range(start, end, step) без материализации.

    Raises:
        InvalidArgument: Если step == 0 или аргументы невалидны

    Examples:
        >>> range_length(1, 10, 2)
        5
        >>> range_length(10, 1, 2)
        0
    """
    return _build_spec(start, end, step).length()


def number_range(
    start: Union[int, float],
    end: Union[int, float],
    step: Union[int, float] = 1,
    *,
    max_length: int = MAX_RANGE_LENGTH,
) -> list:
    """
    Диапазон от start до end включительно с шагом step.

    Args:
        start: Первый элемент
        end: Граница (включительно)
        step: Шаг, не ноль; отрицательный для обратного счёта (default: 1)
        max_length: Максимально допустимое количество элементов

    Returns:
        Список элементов (int если все аргументы int, иначе float)

    Raises:
        InvalidArgument: Если step == 0, аргументы не числа/NaN/Inf
            или длина диапазона превышает max_length

    Examples:
        >>> number_range(1, 10, 2)
        [1, 3, 5, 7, 9]
        >>> number_range(5, 1, -2)
        [5, 3, 1]
        >>> number_range(0, 0.3, 0.1)
        [0.0, 0.1, 0.2, 0.3]
    """
    spec = _build_spec(start, end, step)
    length = spec.length()

    if length > max_length:
        log.debug("range of %d elements exceeds max_length=%d", length, max_length)
        raise InvalidArgument(
            f"Range of {length} elements exceeds max_length={max_length}"
        )

    return [spec.element(index) for index in range(length)]
