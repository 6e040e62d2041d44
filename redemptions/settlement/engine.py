from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any

from redemptions.adapters.interfaces import Authorizer, ContractInspector, RedeemableToken, Vault
from redemptions.basket.registry import BasketRegistry
from redemptions.config.settings import MAX_BASKET_SIZE
from redemptions.data.basket_store import BasketStore
from redemptions.domain.errors import (
    AlreadyMember,
    CollaboratorFailure,
    ConfigurationError,
    DivisionByZero,
    ForbiddenAsset,
    InsufficientFundsError,
    InvalidSignature,
    NotAContract,
    PermissionDenied,
    RedemptionsError,
    ZeroAmount,
)
from redemptions.domain.models import (
    ADD_TOKEN_ROLE,
    ETH,
    REDEEM_ROLE,
    REMOVE_TOKEN_ROLE,
    ZERO_ADDRESS,
    AssetAdded,
    AssetRemoved,
    Payout,
    Redeemed,
    RedemptionReceipt,
    to_address,
    to_uint256,
)
from redemptions.identity.signature import REDEEM_MESSAGE, recover_signer, redemption_digest
from redemptions.infra.log import get_logger
from redemptions.infra.telemetry import EventLog
from redemptions.settlement.shares import pro_rata_share
from redemptions.settlement.transaction import TransactionScope


def _require(obj: Any, protocol: type, name: str) -> None:
    if obj is None or not isinstance(obj, protocol):
        raise ConfigurationError(f"{name} does not implement {protocol.__name__}: {obj!r}")


class Redemptions:
    """Burns claim tokens in exchange for a pro-rata share of every basket asset in the vault.

    One instance owns one basket and one pair of vault/token collaborators.
    ``redeem``, ``add_asset`` and ``remove_asset`` run one at a time inside a
    transaction scope spanning the basket, the vault and the token; a rejected
    call leaves all three as they were. Notifications are appended as the last
    step of that transaction, so a committed call always has its record.
    """

    def __init__(
        self,
        vault: Vault,
        redeemable_token: RedeemableToken,
        assets: Iterable[str] = (),
        *,
        inspector: ContractInspector,
        members: Iterable[str] | None = None,
        acl: Authorizer | None = None,
        events: EventLog | None = None,
        store: BasketStore | None = None,
        redeem_message: str = REDEEM_MESSAGE,
        max_basket_size: int | None = MAX_BASKET_SIZE,
        log: logging.Logger | None = None,
    ):
        _require(vault, Vault, "vault")
        _require(redeemable_token, RedeemableToken, "redeemable_token")
        _require(inspector, ContractInspector, "inspector")
        if acl is not None:
            _require(acl, Authorizer, "acl")

        self.vault = vault
        self.redeemable_token = redeemable_token
        self.inspector = inspector
        self.acl = acl
        self.events = events if events is not None else EventLog()
        self.log = log or get_logger("redemptions")
        self.redeem_digest = redemption_digest(redeem_message)
        self.basket = BasketRegistry(assets, members=members, max_size=max_basket_size)
        self._store = store
        self._tx = TransactionScope(self.basket, self.vault, self.redeemable_token)
        if self._store is not None:
            self._store.write(self.basket.ordered(), self.basket.members())
        self.log.info(
            "redemptions ready token=%s assets=%d",
            self.redeemable_token.address,
            len(self.basket),
        )

    # -- accessors -----------------------------------------------------------

    def list_assets(self) -> tuple[str, ...]:
        return self.basket.ordered()

    def is_asset(self, asset: str) -> bool:
        return self.basket.contains(asset)

    def redeemable_token_identifier(self) -> str:
        return to_address(self.redeemable_token.address)

    def spendable_balance_of(self, holder: str) -> int:
        return self.redeemable_token.spendable_balance_of(to_address(holder))

    # -- basket management ---------------------------------------------------

    def add_asset(self, asset: str, *, sender: str | None = None) -> str:
        self._authorize(ADD_TOKEN_ROLE, sender)
        try:
            with self._tx.atomic("add_asset"):
                asset = to_address(asset)
                if asset == self.redeemable_token_identifier():
                    raise ForbiddenAsset(f"claim token cannot be a reserve asset: {asset}")
                if self.basket.contains(asset):
                    raise AlreadyMember(f"asset already in basket: {asset}")
                if asset != ETH and not self.inspector.is_contract(asset):
                    raise NotAContract(f"no contract at {asset}")
                self.basket.add(asset)
                self._persist()
                self._notify(AssetAdded(asset=asset))
        except RedemptionsError as exc:
            self.log.warning("add_asset rejected: %s", exc)
            raise
        self.log.info("asset added %s (basket=%d)", asset, len(self.basket))
        return asset

    def remove_asset(self, asset: str, *, sender: str | None = None) -> str:
        self._authorize(REMOVE_TOKEN_ROLE, sender)
        try:
            with self._tx.atomic("remove_asset"):
                asset = self.basket.remove(asset)
                self._persist()
                self._notify(AssetRemoved(asset=asset))
        except RedemptionsError as exc:
            self.log.warning("remove_asset rejected: %s", exc)
            raise
        self.log.info("asset removed %s (basket=%d)", asset, len(self.basket))
        return asset

    # -- redemption ----------------------------------------------------------

    def redeem(self, amount: int, signature: bytes | str, *, sender: str | None = None) -> RedemptionReceipt:
        self._authorize(REDEEM_ROLE, sender)
        try:
            amount = to_uint256(amount)
            if amount == 0:
                raise ZeroAmount()
            with self._tx.atomic("redeem"):
                receipt = self._settle(amount, signature)
                self._notify(Redeemed(redeemer=receipt.redeemer, amount=receipt.amount))
        except RedemptionsError as exc:
            self.log.warning("redeem rejected: %s", exc)
            raise
        self.log.info(
            "redeemed redeemer=%s amount=%s payouts=%d",
            receipt.redeemer,
            receipt.amount,
            len(receipt.payouts),
        )
        return receipt

    def _settle(self, amount: int, signature: bytes | str) -> RedemptionReceipt:
        redeemer = recover_signer(self.redeem_digest, signature)
        if redeemer == ZERO_ADDRESS:
            raise InvalidSignature("signature does not recover a signer")

        spendable = self._call("spendable_balance_of", self.redeemable_token.spendable_balance_of, redeemer)
        if spendable < amount:
            raise InsufficientFundsError(f"{redeemer} can spend {spendable}, asked to redeem {amount}")

        supply = self._call("total_supply", self.redeemable_token.total_supply)
        if supply == 0:
            raise DivisionByZero("claim token supply is zero")

        payouts = []
        for asset in self.basket.ordered():
            held = self._call(f"balance_of({asset})", self.vault.balance_of, asset)
            share = pro_rata_share(amount, held, supply)
            self.log.debug("share asset=%s held=%s supply=%s share=%s", asset, held, supply, share)
            if not self._call(f"transfer({asset})", self.vault.transfer, asset, redeemer, share):
                raise CollaboratorFailure(f"vault rejected transfer of {share} {asset} to {redeemer}")
            payouts.append(Payout(asset=asset, amount=share))

        if not self._call("burn", self.redeemable_token.burn, redeemer, amount):
            raise CollaboratorFailure(f"token rejected burn of {amount} from {redeemer}")
        return RedemptionReceipt(redeemer=redeemer, amount=amount, payouts=tuple(payouts))

    # -- helpers -------------------------------------------------------------

    def _call(self, action: str, fn: Callable[..., Any], *args: Any) -> Any:
        try:
            return fn(*args)
        except RedemptionsError:
            raise
        except Exception as exc:
            raise CollaboratorFailure(f"{action} failed: {exc}") from exc

    def _authorize(self, role: str, sender: str | None) -> None:
        if self.acl is None:
            return
        if sender is None or not self.acl.has_permission(sender, role):
            self.log.warning("permission denied sender=%s role=%s", sender, role)
            raise PermissionDenied(f"{sender} lacks role {role}")

    def _persist(self) -> None:
        if self._store is not None:
            self._call("basket snapshot", self._store.write, self.basket.ordered(), self.basket.members())

    def _notify(self, event: Any) -> None:
        # last step of the transaction: a failed append rolls the call back
        self._call(f"event log ({event.name})", self.events.emit, event)
