"""
NumberOps — Фасад статических числовых операций

Единая точка доступа ко всем операциям numops под короткими именами:

    >>> from numops import NumberOps
    >>> NumberOps.add([1, 2, 3])
    6
    >>> NumberOps.round(3.14159, 2)
    3.14
    >>> NumberOps.range(1, 10, 2)
    [1, 3, 5, 7, 9]

Класс не хранит состояние и не создаёт экземпляров: все методы
staticmethod, безопасны для параллельного вызова.
"""

from numops.math.conversions import to_array, to_float, to_int, to_string
from numops.math.predicates import is_even, is_odd, is_prime
from numops.math.reductions import add, average, divide, multiply, subtract
from numops.math.scalar_ops import ceil, floor, modulus, power, round_half_away
from numops.math.sequences import number_range, range_length


class NumberOps:
    """
    Статические числовые операции.

    Группы:
    1. Reductions: add, subtract, multiply, divide, average
    2. Scalar: modulus, power, round, ceil, floor
    3. Conversions: to_string, to_int, to_float, to_array
    4. Predicates: is_even, is_odd, is_prime
    5. Sequences: range, range_length
    """

    # Reductions
    add = staticmethod(add)
    subtract = staticmethod(subtract)
    multiply = staticmethod(multiply)
    divide = staticmethod(divide)
    average = staticmethod(average)

    # Scalar operations
    modulus = staticmethod(modulus)
    power = staticmethod(power)
    round = staticmethod(round_half_away)
    ceil = staticmethod(ceil)
    floor = staticmethod(floor)

    # Conversions
    to_string = staticmethod(to_string)
    to_int = staticmethod(to_int)
    to_float = staticmethod(to_float)
    to_array = staticmethod(to_array)

    # Predicates
    is_even = staticmethod(is_even)
    is_odd = staticmethod(is_odd)
    is_prime = staticmethod(is_prime)

    # Sequences
    range = staticmethod(number_range)
    range_length = staticmethod(range_length)

    def __init__(self) -> None:
        raise TypeError("NumberOps is a static namespace and cannot be instantiated")
