"""
Proportional redemption of a claim token against a basket of vault-held reserve assets.
"""

from redemptions.adapters import (
    InMemoryToken,
    InMemoryVault,
    KnownContracts,
    RoleTable,
    Web3ContractInspector,
)
from redemptions.basket import BasketRegistry
from redemptions.config import Settings, load_settings
from redemptions.domain import (
    ADD_TOKEN_ROLE,
    ANY_ENTITY,
    ETH,
    REDEEM_ROLE,
    REMOVE_TOKEN_ROLE,
    AssetAdded,
    AssetRemoved,
    Payout,
    Redeemed,
    RedemptionReceipt,
    RedemptionsError,
)
from redemptions.identity import REDEEM_MESSAGE, recover_signer, redemption_digest, sign_redemption_intent
from redemptions.runtime import build_redemptions
from redemptions.settlement import Redemptions

__all__ = [
    "InMemoryToken",
    "InMemoryVault",
    "KnownContracts",
    "RoleTable",
    "Web3ContractInspector",
    "BasketRegistry",
    "Settings",
    "load_settings",
    "ADD_TOKEN_ROLE",
    "ANY_ENTITY",
    "ETH",
    "REDEEM_ROLE",
    "REMOVE_TOKEN_ROLE",
    "AssetAdded",
    "AssetRemoved",
    "Payout",
    "Redeemed",
    "RedemptionReceipt",
    "RedemptionsError",
    "REDEEM_MESSAGE",
    "recover_signer",
    "redemption_digest",
    "sign_redemption_intent",
    "build_redemptions",
    "Redemptions",
]
