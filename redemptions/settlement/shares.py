from __future__ import annotations

from redemptions.domain.errors import ArithmeticOverflow, DivisionByZero
from redemptions.domain.models import UINT256_MAX


def checked_mul(a: int, b: int) -> int:
    product = a * b
    if product > UINT256_MAX:
        raise ArithmeticOverflow(f"{a} * {b} exceeds uint256")
    return product


def checked_div(a: int, b: int) -> int:
    if b == 0:
        raise DivisionByZero(f"{a} / 0")
    return a // b


def pro_rata_share(amount: int, balance: int, total_supply: int) -> int:
    """floor(amount * balance / total_supply), multiplying first to keep precision."""
    return checked_div(checked_mul(amount, balance), total_supply)
