"""
Errors — Иерархия исключений numops

Все ошибки библиотеки наследуются от NumberOpsError и одновременно от
соответствующего builtin исключения, поэтому вызывающий код может ловить
как InvalidArgument, так и обычный ValueError.

ИНВАРИАНТЫ:
1. Ошибки поднимаются синхронно в точке обнаружения
2. Нет retry и нет fallback значений: ошибка всегда уходит к вызывающему
"""


class NumberOpsError(Exception):
    """Базовое исключение для всех ошибок numops."""

    pass


class InvalidArgument(NumberOpsError, ValueError):
    """
    Невалидный аргумент операции.

    Поднимается при:
    - нечисловом элементе в reduction
    - step == 0 в генерации диапазона
    - нецелом значении для проверок чётности/простоты
    - NaN/Inf в конверсии to_int
    - слишком длинном диапазоне (превышение max_length)
    """

    pass


class DivisionByZero(NumberOpsError, ZeroDivisionError):
    """Деление (divide/modulus) на точный ноль."""

    pass
