import pytest

from redemptions.domain.errors import ArithmeticOverflow, DivisionByZero, RedemptionsError
from redemptions.domain.models import UINT256_MAX
from redemptions.settlement.shares import checked_div, checked_mul, pro_rata_share


def test_pro_rata_share_floors() -> None:
    assert pro_rata_share(100, 500, 1000) == 50
    assert pro_rata_share(100, 200, 1000) == 20
    assert pro_rata_share(1, 1, 3) == 0
    assert pro_rata_share(2, 5, 3) == 3
    assert pro_rata_share(7, 0, 10) == 0


def test_multiplies_before_dividing() -> None:
    # dividing first would give 0 * 10 = 0
    assert pro_rata_share(10, 3, 20) == 1


def test_large_values_within_range() -> None:
    assert checked_mul(2**128, 2**127) == 2**255
    assert pro_rata_share(10**30, 10**40, 10**35) == 10**35


def test_overflow_is_rejected() -> None:
    with pytest.raises(ArithmeticOverflow) as err:
        pro_rata_share(UINT256_MAX, 2, 1)
    assert isinstance(err.value, ArithmeticError)
    assert isinstance(err.value, RedemptionsError)


def test_division_by_zero() -> None:
    with pytest.raises(DivisionByZero) as err:
        checked_div(1, 0)
    assert isinstance(err.value, ZeroDivisionError)
    with pytest.raises(DivisionByZero):
        pro_rata_share(1, 1, 0)
