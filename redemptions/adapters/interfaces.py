from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Vault(Protocol):
    """Custodian of reserve assets. Transfers are instructed, never performed here."""

    def balance_of(self, asset: str) -> int: ...

    def transfer(self, asset: str, to: str, amount: int) -> bool: ...

    def checkpoint(self) -> Any: ...

    def rollback(self, state: Any) -> None: ...


@runtime_checkable
class RedeemableToken(Protocol):
    """Issuer of the claim token: supply, spendable balances and burns."""

    @property
    def address(self) -> str: ...

    def total_supply(self) -> int: ...

    def spendable_balance_of(self, holder: str) -> int: ...

    def burn(self, holder: str, amount: int) -> bool: ...

    def checkpoint(self) -> Any: ...

    def rollback(self, state: Any) -> None: ...


@runtime_checkable
class ContractInspector(Protocol):
    def is_contract(self, address: str) -> bool: ...


@runtime_checkable
class Authorizer(Protocol):
    def has_permission(self, who: str, role: str) -> bool: ...
