from .engine import Redemptions
from .shares import checked_div, checked_mul, pro_rata_share
from .transaction import TransactionScope

__all__ = ["Redemptions", "TransactionScope", "checked_div", "checked_mul", "pro_rata_share"]
