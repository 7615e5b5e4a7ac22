"""
Тесты для Conversions и Predicates

Проверяет:
1. to_string / to_int / to_float / to_array
2. Усечение к нулю в to_int
3. Обратимость to_int(to_float(n)) == n
4. is_even / is_odd / is_prime (trial division)
"""

import math

import pytest

from numops.errors import InvalidArgument
from numops.math.conversions import to_array, to_float, to_int, to_string
from numops.math.predicates import is_even, is_odd, is_prime


# =============================================================================
# ТЕСТЫ: Conversions
# =============================================================================


class TestToString:
    """Тесты to_string"""

    def test_int(self) -> None:
        assert to_string(7) == "7"

    def test_float(self) -> None:
        assert to_string(2.5) == "2.5"
        assert to_string(2.0) == "2.0"

    def test_non_numeric(self) -> None:
        with pytest.raises(InvalidArgument):
            to_string("7")


class TestToInt:
    """Тесты to_int"""

    def test_truncates_toward_zero(self) -> None:
        assert to_int(2.7) == 2
        assert to_int(-2.7) == -2

    def test_int_unchanged(self) -> None:
        assert to_int(42) == 42

    def test_non_finite_rejected(self) -> None:
        """NaN/Inf не представимы как int"""
        with pytest.raises(InvalidArgument, match="Cannot convert"):
            to_int(math.inf)
        with pytest.raises(InvalidArgument):
            to_int(math.nan)

    @pytest.mark.parametrize("n", [0, 1, -1, 12345, -987654, 2**53])
    def test_round_trip_through_float(self, n: int) -> None:
        """to_int(to_float(n)) восстанавливает n"""
        assert to_int(to_float(n)) == n


class TestToFloatAndArray:
    """Тесты to_float и to_array"""

    def test_to_float(self) -> None:
        result = to_float(3)
        assert result == 3.0
        assert isinstance(result, float)

    def test_to_array(self) -> None:
        assert to_array(5) == [5]
        assert to_array(1.5) == [1.5]

    def test_to_array_returns_new_list(self) -> None:
        assert to_array(1) is not to_array(1)

    def test_non_numeric(self) -> None:
        with pytest.raises(InvalidArgument):
            to_float(None)
        with pytest.raises(InvalidArgument):
            to_array("1")


# =============================================================================
# ТЕСТЫ: Predicates
# =============================================================================


class TestParity:
    """Тесты is_even / is_odd"""

    def test_even(self) -> None:
        assert is_even(4)
        assert is_even(0)
        assert is_even(-2)
        assert not is_even(3)

    def test_odd(self) -> None:
        assert not is_odd(4)
        assert is_odd(3)
        assert is_odd(-3)

    def test_float_rejected(self) -> None:
        with pytest.raises(InvalidArgument, match="must be an integer"):
            is_even(4.0)

    def test_bool_rejected(self) -> None:
        with pytest.raises(InvalidArgument):
            is_odd(True)


class TestIsPrime:
    """Тесты is_prime"""

    @pytest.mark.parametrize("n", [-7, -1, 0, 1])
    def test_not_prime_at_or_below_one(self, n: int) -> None:
        assert not is_prime(n)

    @pytest.mark.parametrize("n", [2, 3, 5, 7, 13, 97, 7919])
    def test_primes(self, n: int) -> None:
        assert is_prime(n)

    @pytest.mark.parametrize("n", [4, 9, 25, 49, 100, 7917])
    def test_composites(self, n: int) -> None:
        assert not is_prime(n)

    def test_square_of_prime(self) -> None:
        """Делитель ровно floor(sqrt(n)) проверяется"""
        assert not is_prime(97 * 97)

    def test_primes_below_30(self) -> None:
        assert [n for n in range(30) if is_prime(n)] == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]

    def test_float_rejected(self) -> None:
        with pytest.raises(InvalidArgument):
            is_prime(7.0)


class TestHugeIntegerConversions:
    """int вне диапазона float"""

    def test_to_float_overflows_to_inf(self) -> None:
        assert to_float(10**400) == math.inf
        assert to_float(-(10**400)) == -math.inf

    def test_to_int_keeps_huge_int(self) -> None:
        assert to_int(10**400) == 10**400
