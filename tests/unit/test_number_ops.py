"""
Тесты для NumberOps — фасада статических операций

Проверяет полный набор свойств операций через фасад и публичный
API пакета.
"""

import pytest

import numops
from numops import DivisionByZero, InvalidArgument, NumberOps


class TestNumberOpsProperties:
    """Ключевые свойства операций через NumberOps"""

    def test_add(self) -> None:
        assert NumberOps.add([]) == 0
        assert NumberOps.add([5]) == 5
        assert NumberOps.add([1, 2, 3]) == 6

    def test_subtract_multiply(self) -> None:
        assert NumberOps.subtract([10, 3, 2]) == 5
        assert NumberOps.multiply([2, 3, 4]) == 24

    def test_divide(self) -> None:
        assert NumberOps.divide([10, 2]) == 5
        with pytest.raises(DivisionByZero):
            NumberOps.divide([10, 0])

    def test_modulus(self) -> None:
        assert NumberOps.modulus(10, 3) == 1
        with pytest.raises(DivisionByZero):
            NumberOps.modulus(10, 0)

    def test_average(self) -> None:
        assert NumberOps.average([]) == 0
        assert NumberOps.average([2, 4, 6]) == 4

    def test_power(self) -> None:
        assert NumberOps.power(2, 10) == 1024
        assert NumberOps.power(2, -1) == 0.5

    def test_rounding(self) -> None:
        assert NumberOps.round(3.14159, 2) == 3.14
        assert NumberOps.ceil(2.1) == 3.0
        assert NumberOps.floor(2.9) == 2.0

    def test_range(self) -> None:
        assert NumberOps.range(1, 10, 2) == [1, 3, 5, 7, 9]
        with pytest.raises(InvalidArgument):
            NumberOps.range(1, 10, 0)
        assert NumberOps.range_length(1, 10, 2) == 5

    def test_predicates(self) -> None:
        assert NumberOps.is_even(4) is True
        assert NumberOps.is_odd(4) is False
        assert NumberOps.is_prime(1) is False
        assert NumberOps.is_prime(2) is True
        assert NumberOps.is_prime(97) is True
        assert NumberOps.is_prime(100) is False

    @pytest.mark.parametrize("n", [-1000, -1, 0, 1, 7, 10**15])
    def test_to_int_to_float_round_trip(self, n: int) -> None:
        assert NumberOps.to_int(NumberOps.to_float(n)) == n

    def test_conversions(self) -> None:
        assert NumberOps.to_string(3) == "3"
        assert NumberOps.to_array(3) == [3]


class TestNumberOpsNamespace:
    """NumberOps как статическое пространство имён"""

    def test_not_instantiable(self) -> None:
        with pytest.raises(TypeError, match="static namespace"):
            NumberOps()

    def test_builtin_round_not_shadowed(self) -> None:
        """NumberOps.round не влияет на builtin round"""
        assert round(2.5) == 2
        assert NumberOps.round(2.5) == 3.0

    def test_facade_matches_functions(self) -> None:
        assert NumberOps.add is numops.add
        assert NumberOps.round is numops.round_half_away
        assert NumberOps.range is numops.number_range


class TestPublicApi:
    """Публичный API пакета"""

    def test_all_exports_resolve(self) -> None:
        for name in numops.__all__:
            assert hasattr(numops, name), name

    def test_version(self) -> None:
        assert numops.__version__ == "0.1.0"
