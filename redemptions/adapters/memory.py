from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable, Iterable, Mapping

from redemptions.domain.models import ANY_ENTITY, to_address, to_uint256


class InMemoryVault:
    """Process-local custodian ledger.

    ``on_transfer(asset, to, amount)`` runs after funds move, the way a token
    receive hook would; anything it raises aborts the transfer.
    """

    def __init__(
        self,
        balances: Mapping[str, int] | None = None,
        *,
        on_transfer: Callable[[str, str, int], None] | None = None,
    ):
        self._balances: dict[str, int] = defaultdict(int)
        self._received: dict[tuple[str, str], int] = defaultdict(int)
        for asset, amount in (balances or {}).items():
            self.deposit(asset, amount)
        self.on_transfer = on_transfer

    def deposit(self, asset: str, amount: int) -> None:
        self._balances[to_address(asset)] += to_uint256(amount)

    def balance_of(self, asset: str) -> int:
        return self._balances.get(to_address(asset), 0)

    def received(self, asset: str, holder: str) -> int:
        return self._received.get((to_address(asset), to_address(holder)), 0)

    def transfer(self, asset: str, to: str, amount: int) -> bool:
        asset, to = to_address(asset), to_address(to)
        if amount < 0 or amount > self._balances.get(asset, 0):
            return False
        self._balances[asset] -= amount
        self._received[(asset, to)] += amount
        if self.on_transfer is not None:
            self.on_transfer(asset, to, amount)
        return True

    def checkpoint(self) -> tuple[dict[str, int], dict[tuple[str, str], int]]:
        return dict(self._balances), dict(self._received)

    def rollback(self, state: tuple[dict[str, int], dict[tuple[str, str], int]]) -> None:
        balances, received = state
        self._balances = defaultdict(int, balances)
        self._received = defaultdict(int, received)


class InMemoryToken:
    """MiniMe-style claim token: supply, holder balances, locked (non-spendable) amounts."""

    def __init__(self, address: str, balances: Mapping[str, int] | None = None):
        self._address = to_address(address)
        self._balances: dict[str, int] = defaultdict(int)
        self._locked: dict[str, int] = defaultdict(int)
        self._supply = 0
        for holder, amount in (balances or {}).items():
            self.generate(holder, amount)

    @property
    def address(self) -> str:
        return self._address

    def generate(self, holder: str, amount: int) -> None:
        self._balances[to_address(holder)] += to_uint256(amount)
        self._supply += amount

    def lock(self, holder: str, amount: int) -> None:
        self._locked[to_address(holder)] = to_uint256(amount)

    def total_supply(self) -> int:
        return self._supply

    def balance_of(self, holder: str) -> int:
        return self._balances.get(to_address(holder), 0)

    def spendable_balance_of(self, holder: str) -> int:
        holder = to_address(holder)
        return max(0, self._balances.get(holder, 0) - self._locked.get(holder, 0))

    def burn(self, holder: str, amount: int) -> bool:
        holder = to_address(holder)
        if amount < 0 or amount > self._balances.get(holder, 0):
            return False
        self._balances[holder] -= amount
        self._supply -= amount
        return True

    def checkpoint(self) -> tuple[dict[str, int], dict[str, int], int]:
        return dict(self._balances), dict(self._locked), self._supply

    def rollback(self, state: tuple[dict[str, int], dict[str, int], int]) -> None:
        balances, locked, supply = state
        self._balances = defaultdict(int, balances)
        self._locked = defaultdict(int, locked)
        self._supply = supply


class KnownContracts:
    """Contract inspector backed by a fixed set of deployed addresses."""

    def __init__(self, addresses: Iterable[str] = ()):
        self._addresses = {to_address(a) for a in addresses}

    def deploy(self, address: str) -> str:
        address = to_address(address)
        self._addresses.add(address)
        return address

    def is_contract(self, address: str) -> bool:
        return to_address(address) in self._addresses


class RoleTable:
    """Role grants keyed by role id; ``ANY_ENTITY`` opens a role to every caller."""

    def __init__(self):
        self._grants: dict[str, set[str]] = defaultdict(set)

    def grant(self, role: str, who: str) -> None:
        self._grants[role].add(to_address(who))

    def revoke(self, role: str, who: str) -> None:
        self._grants[role].discard(to_address(who))

    def has_permission(self, who: str, role: str) -> bool:
        grantees = self._grants.get(role, set())
        if ANY_ENTITY in grantees:
            return True
        return who is not None and to_address(who) in grantees
