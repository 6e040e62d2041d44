from __future__ import annotations

from collections.abc import Iterable, Iterator

from web3 import Web3

from redemptions.domain.errors import AlreadyMember, BasketFull, ConfigurationError, NotAMember
from redemptions.domain.models import to_address


class BasketRegistry:
    """Ordered reserve-asset list paired with a membership set.

    The initial list is taken as given, duplicates included. Later additions are
    checked one at a time so an added asset appears exactly once.

    ``members`` restores a saved membership set. After a removal it can be a
    strict subset of the order, since initial duplicates keep their other slots.
    """

    def __init__(
        self,
        assets: Iterable[str] = (),
        *,
        members: Iterable[str] | None = None,
        max_size: int | None = None,
    ):
        self._order: list[str] = [to_address(a) for a in assets]
        if members is None:
            self._members: set[str] = set(self._order)
        else:
            self._members = {to_address(a) for a in members}
            stray = self._members.difference(self._order)
            if stray:
                raise ConfigurationError(f"members missing from basket order: {sorted(stray)}")
        self.max_size = max_size

    def __contains__(self, asset: object) -> bool:
        if not isinstance(asset, str) or not Web3.is_address(asset):
            return False
        return self.contains(asset)

    def __len__(self) -> int:
        return len(self._order)

    def __iter__(self) -> Iterator[str]:
        return iter(self.ordered())

    def contains(self, asset: str) -> bool:
        return to_address(asset) in self._members

    def ordered(self) -> tuple[str, ...]:
        return tuple(self._order)

    def members(self) -> frozenset[str]:
        return frozenset(self._members)

    def add(self, asset: str) -> str:
        asset = to_address(asset)
        if asset in self._members:
            raise AlreadyMember(f"asset already in basket: {asset}")
        if self.max_size is not None and len(self._order) >= self.max_size:
            raise BasketFull(f"basket holds {len(self._order)} assets (max {self.max_size})")
        self._order.append(asset)
        self._members.add(asset)
        return asset

    def remove(self, asset: str) -> str:
        asset = to_address(asset)
        if asset not in self._members:
            raise NotAMember(f"asset not in basket: {asset}")
        self._members.discard(asset)
        # first occurrence only; initial duplicates keep their remaining slots
        self._order.remove(asset)
        return asset

    def checkpoint(self) -> tuple[tuple[str, ...], frozenset[str]]:
        return tuple(self._order), frozenset(self._members)

    def rollback(self, state: tuple[tuple[str, ...], frozenset[str]]) -> None:
        order, members = state
        self._order = list(order)
        self._members = set(members)
