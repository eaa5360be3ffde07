"""
Тесты для Width Selector и Fast Combine

Проверяет:
1. Выбор "двойного" типа для разрядностей 32/64/128
2. Границы представимости WideType
3. double_and_add для ассоциативных (в т.ч. некоммутативных) операций
4. Число применений op — O(log n)
5. Валидацию числа шагов (беззнаковое 64-битное значение)
"""

import operator

import pytest

from lcg_predict.core.config import MAX_STEP_COUNT, validate_step_count, validate_width
from lcg_predict.core.math.fast_combine import double_and_add
from lcg_predict.core.math.width import WideType, least_doubled_int, least_doubled_uint

# =============================================================================
# ТЕСТЫ WIDTH SELECTOR
# =============================================================================


class TestLeastDoubledUint:
    """Тесты для least_doubled_uint"""

    def test_32_selects_64(self) -> None:
        """uint32 → uint64"""
        assert least_doubled_uint(32) == WideType(bits=64, signed=False)

    def test_64_selects_128(self) -> None:
        """uint64 → uint128"""
        assert least_doubled_uint(64) == WideType(bits=128, signed=False)

    def test_128_falls_back_to_arbitrary_precision(self) -> None:
        """uint128 → arbitrary precision"""
        wide = least_doubled_uint(128)
        assert wide.is_arbitrary_precision
        assert wide.max_value is None
        assert wide.contains(2**1000)

    def test_small_widths_select_smallest_native(self) -> None:
        """Малые разрядности → наименьший native тип (32)"""
        assert least_doubled_uint(1).bits == 32
        assert least_doubled_uint(16).bits == 32
        assert least_doubled_uint(17).bits == 64

    def test_invalid_bits_raises(self) -> None:
        with pytest.raises(ValueError, match="bits must be a positive int"):
            least_doubled_uint(0)

        with pytest.raises(ValueError, match="bits must be a positive int"):
            least_doubled_uint(-8)


class TestLeastDoubledInt:
    """Тесты для least_doubled_int"""

    def test_signed_matches_unsigned_width(self) -> None:
        assert least_doubled_int(32) == WideType(bits=64, signed=True)
        assert least_doubled_int(64) == WideType(bits=128, signed=True)
        assert least_doubled_int(128).is_arbitrary_precision


class TestWideTypeBounds:
    """Тесты границ WideType"""

    def test_unsigned_bounds(self) -> None:
        wide = WideType(bits=64)
        assert wide.min_value == 0
        assert wide.max_value == 2**64 - 1
        assert wide.contains(2**64 - 1)
        assert not wide.contains(2**64)
        assert not wide.contains(-1)

    def test_signed_bounds(self) -> None:
        wide = WideType(bits=64, signed=True)
        assert wide.min_value == -(2**63)
        assert wide.max_value == 2**63 - 1
        assert wide.contains(-(2**63))
        assert not wide.contains(2**63)

    def test_worst_case_lcg_intermediate_fits(self) -> None:
        """x*y + z + w для максимальных W-битных значений помещается в U"""
        for width in (32, 64):
            top = 2**width - 1
            assert least_doubled_uint(width).contains(top * top + top + top)


# =============================================================================
# ТЕСТЫ FAST COMBINE
# =============================================================================


class TestDoubleAndAdd:
    """Тесты для double_and_add"""

    def test_zero_returns_unit(self) -> None:
        assert double_and_add(7, 0, operator.mul, 1) == 1
        assert double_and_add("abc", 0, operator.add, "") == ""

    def test_one_returns_element(self) -> None:
        assert double_and_add(7, 1, operator.mul, 1) == 7

    def test_integer_power(self) -> None:
        assert double_and_add(3, 13, operator.mul, 1) == 3**13
        assert double_and_add(2, 100, operator.mul, 1) == 2**100

    def test_repeated_addition(self) -> None:
        assert double_and_add(5, 1000, operator.add, 0) == 5000

    def test_non_commutative_operation(self) -> None:
        """Ассоциативной операции достаточно: конкатенация строк"""
        assert double_and_add("xy", 5, operator.add, "") == "xy" * 5

    def test_non_commutative_matrix_product(self) -> None:
        """2x2 матрицы: степень совпадает с последовательным умножением"""

        def matmul(p, q):
            return (
                p[0] * q[0] + p[1] * q[2],
                p[0] * q[1] + p[1] * q[3],
                p[2] * q[0] + p[3] * q[2],
                p[2] * q[1] + p[3] * q[3],
            )

        identity = (1, 0, 0, 1)
        fib = (1, 1, 1, 0)

        expected = identity
        for _ in range(30):
            expected = matmul(expected, fib)

        assert double_and_add(fib, 30, matmul, identity) == expected
        # F(30) = 832040
        assert expected[1] == 832040

    def test_logarithmic_number_of_applications(self) -> None:
        """Число применений op не превышает 2 * bit_length(n)"""
        calls = []

        def counting_add(x, y):
            calls.append((x, y))
            return x + y

        n = 1_000_000
        assert double_and_add(1, n, counting_add, 0) == n
        assert len(calls) <= 2 * n.bit_length()

    def test_max_step_count_accepted(self) -> None:
        assert double_and_add(1, MAX_STEP_COUNT, operator.add, 0) == MAX_STEP_COUNT

    def test_negative_count_raises(self) -> None:
        with pytest.raises(ValueError, match="must be non-negative"):
            double_and_add(2, -1, operator.mul, 1)

    def test_count_beyond_64_bits_raises(self) -> None:
        with pytest.raises(ValueError, match="must fit in 64 bits"):
            double_and_add(2, 2**64, operator.mul, 1)

    def test_non_integer_count_raises(self) -> None:
        with pytest.raises(ValueError, match="must be an int"):
            double_and_add(2, 2.0, operator.mul, 1)

        with pytest.raises(ValueError, match="must be an int"):
            double_and_add(2, True, operator.mul, 1)


# =============================================================================
# ТЕСТЫ CONFIG
# =============================================================================


class TestConfigValidation:
    """Тесты валидаторов конфигурации"""

    def test_supported_widths(self) -> None:
        for width in (32, 64, 128):
            validate_width(width)

    def test_unsupported_width_raises(self) -> None:
        with pytest.raises(ValueError, match="width must be one of"):
            validate_width(48)

    def test_step_count_custom_name(self) -> None:
        with pytest.raises(ValueError, match="steps must be non-negative"):
            validate_step_count(-3, "steps")
