import json
import shutil
from pathlib import Path

import pytest

from redemptions.adapters.chain import Web3ContractInspector
from redemptions.config.settings import Settings
from redemptions.domain.errors import CollaboratorFailure, ConfigurationError, NotAMember
from redemptions.runtime.app import build_redemptions
from redemptions.tests.support import ASSET_A, ASSET_B, ASSET_C, intent_signature


def test_build_writes_events_and_basket(tmp_path: Path, vault, token, contracts) -> None:
    settings = Settings(data_dir=str(tmp_path), persist_basket=True)
    r = build_redemptions(settings, vault=vault, redeemable_token=token, assets=[ASSET_A, ASSET_B], inspector=contracts)

    r.add_asset(ASSET_C)
    r.redeem(100, intent_signature())

    basket = json.loads((tmp_path / "basket.json").read_text())
    assert basket["assets"] == [ASSET_A, ASSET_B, ASSET_C]
    assert basket["members"] == sorted([ASSET_A, ASSET_B, ASSET_C])
    events = (tmp_path / "redemption_events.jsonl").read_text().splitlines()
    assert [json.loads(e)["event"] for e in events] == ["AssetAdded", "Redeemed"]


def test_build_restores_persisted_basket(tmp_path: Path, vault, token, contracts) -> None:
    settings = Settings(data_dir=str(tmp_path), persist_basket=True, event_log_enabled=False)
    first = build_redemptions(settings, vault=vault, redeemable_token=token, assets=[ASSET_A], inspector=contracts)
    first.add_asset(ASSET_C)

    second = build_redemptions(settings, vault=vault, redeemable_token=token, assets=[ASSET_B], inspector=contracts)
    assert second.list_assets() == (ASSET_A, ASSET_C)
    assert not (tmp_path / "redemption_events.jsonl").exists()


def test_restart_keeps_membership_after_removing_a_duplicate(tmp_path: Path, vault, token, contracts) -> None:
    settings = Settings(data_dir=str(tmp_path), persist_basket=True, event_log_enabled=False)
    first = build_redemptions(
        settings, vault=vault, redeemable_token=token, assets=[ASSET_A, ASSET_B, ASSET_A], inspector=contracts
    )
    first.remove_asset(ASSET_A)
    assert first.list_assets() == (ASSET_B, ASSET_A)
    assert not first.is_asset(ASSET_A)

    second = build_redemptions(settings, vault=vault, redeemable_token=token, inspector=contracts)
    assert second.list_assets() == first.list_assets()
    assert second.is_asset(ASSET_A) == first.is_asset(ASSET_A)
    assert second.is_asset(ASSET_B) == first.is_asset(ASSET_B)
    with pytest.raises(NotAMember):
        second.remove_asset(ASSET_A)
    second.add_asset(ASSET_A)
    assert second.list_assets() == (ASSET_B, ASSET_A, ASSET_A)


def test_redeem_rolls_back_when_event_log_cannot_be_written(tmp_path: Path, vault, token, contracts) -> None:
    data_dir = tmp_path / "state"
    settings = Settings(data_dir=str(data_dir))
    r = build_redemptions(settings, vault=vault, redeemable_token=token, assets=[ASSET_A, ASSET_B], inspector=contracts)
    shutil.rmtree(data_dir)

    with pytest.raises(CollaboratorFailure) as err:
        r.redeem(100, intent_signature())
    assert isinstance(err.value.__cause__, FileNotFoundError)
    assert token.total_supply() == 1000
    assert vault.balance_of(ASSET_A) == 500
    assert vault.balance_of(ASSET_B) == 200
    assert len(r.events) == 0

    data_dir.mkdir()
    receipt = r.redeem(100, intent_signature())
    assert receipt.paid(ASSET_A) == 50
    assert token.total_supply() == 900
    rows = (data_dir / "redemption_events.jsonl").read_text().splitlines()
    assert [json.loads(row)["event"] for row in rows] == ["Redeemed"]


def test_build_applies_message_and_capacity(tmp_path: Path, vault, token, contracts) -> None:
    settings = Settings(data_dir=str(tmp_path), redeem_message="custom intent", max_basket_size=2)
    r = build_redemptions(settings, vault=vault, redeemable_token=token, assets=[ASSET_A, ASSET_B], inspector=contracts)
    assert r.basket.max_size == 2
    assert r.redeem(10, intent_signature(message="custom intent")).amount == 10


def test_build_requires_an_inspector(tmp_path: Path, vault, token) -> None:
    with pytest.raises(ConfigurationError):
        build_redemptions(Settings(data_dir=str(tmp_path)), vault=vault, redeemable_token=token)


def test_build_uses_rpc_inspector(tmp_path: Path, vault, token) -> None:
    settings = Settings(data_dir=str(tmp_path), rpc_url="http://127.0.0.1:8545", rpc_poa=True)
    r = build_redemptions(settings, vault=vault, redeemable_token=token, assets=[ASSET_A])
    assert isinstance(r.inspector, Web3ContractInspector)
