from __future__ import annotations

from collections.abc import Iterable

from redemptions.adapters.chain import Web3ContractInspector
from redemptions.adapters.interfaces import Authorizer, ContractInspector, RedeemableToken, Vault
from redemptions.config import Settings
from redemptions.data.basket_store import BasketStore
from redemptions.domain.errors import ConfigurationError
from redemptions.infra import EventLog, get_logger
from redemptions.settlement.engine import Redemptions


def build_redemptions(
    settings: Settings,
    *,
    vault: Vault,
    redeemable_token: RedeemableToken,
    assets: Iterable[str] = (),
    inspector: ContractInspector | None = None,
    acl: Authorizer | None = None,
) -> Redemptions:
    """Wire one Redemptions instance from settings and host-provided collaborators."""
    log = get_logger("redemptions", settings.log_level)

    if inspector is None:
        if not settings.rpc_url:
            raise ConfigurationError("no contract inspector given and RPC_URL is not set")
        inspector = Web3ContractInspector.from_rpc(
            settings.rpc_url,
            poa=settings.rpc_poa,
            timeout=settings.rpc_timeout,
        )
        log.info("contract inspector via rpc=%s poa=%s", settings.rpc_url, settings.rpc_poa)

    store = BasketStore(settings.data_dir) if settings.persist_basket else None
    members = None
    if store is not None and store.exists():
        assets, members = store.read()
        log.info("restored basket from %s (%d assets)", store.path, len(assets))

    events = EventLog(settings.data_dir if settings.event_log_enabled else None)

    return Redemptions(
        vault,
        redeemable_token,
        assets,
        inspector=inspector,
        members=members,
        acl=acl,
        events=events,
        store=store,
        redeem_message=settings.redeem_message,
        max_basket_size=settings.max_basket_size,
        log=log,
    )
