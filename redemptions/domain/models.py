from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from web3 import Web3

from redemptions.domain.errors import InvalidAmount, InvalidAsset

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"
# Native currency held by the vault is addressed by the zero address.
ETH = ZERO_ADDRESS
ANY_ENTITY = Web3.to_checksum_address("0x" + "f" * 40)

UINT256_MAX = 2**256 - 1


def _role(name: str) -> str:
    return Web3.keccak(text=name).hex()


REDEEM_ROLE = _role("REDEEM_ROLE")
ADD_TOKEN_ROLE = _role("ADD_TOKEN_ROLE")
REMOVE_TOKEN_ROLE = _role("REMOVE_TOKEN_ROLE")


def to_address(value: str) -> str:
    """Normalize an account/asset identifier to its checksum form."""
    if not isinstance(value, str) or not Web3.is_address(value):
        raise InvalidAsset(f"not an address: {value!r}")
    return Web3.to_checksum_address(value)


def to_uint256(value: int, what: str = "amount") -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidAmount(f"{what} must be an integer, got {type(value).__name__}")
    if value < 0 or value > UINT256_MAX:
        raise InvalidAmount(f"{what} out of uint256 range: {value}")
    return value


@dataclass(frozen=True)
class Payout:
    asset: str
    amount: int


@dataclass(frozen=True)
class RedemptionReceipt:
    redeemer: str
    amount: int
    payouts: tuple[Payout, ...] = ()

    def paid(self, asset: str) -> int:
        asset = to_address(asset)
        return sum(p.amount for p in self.payouts if p.asset == asset)


@dataclass(frozen=True)
class AssetAdded:
    name: ClassVar[str] = "AssetAdded"
    asset: str


@dataclass(frozen=True)
class AssetRemoved:
    name: ClassVar[str] = "AssetRemoved"
    asset: str


@dataclass(frozen=True)
class Redeemed:
    name: ClassVar[str] = "Redeemed"
    redeemer: str
    amount: int
