"""Addresses, keys and signing shortcuts shared by the test modules."""

from __future__ import annotations

from eth_account import Account

from redemptions.domain.models import to_address
from redemptions.identity.signature import redemption_digest, sign_redemption_intent

CLAIM_TOKEN = to_address("0x" + "c0" * 20)
ASSET_A = to_address("0x" + "a1" * 20)
ASSET_B = to_address("0x" + "b2" * 20)
ASSET_C = to_address("0x" + "c3" * 20)
FORWARDER = to_address("0x" + "f0" * 20)

REDEEMER_KEY = "0x" + "11" * 32
OTHER_KEY = "0x" + "22" * 32
REDEEMER = Account.from_key(REDEEMER_KEY).address
OTHER = Account.from_key(OTHER_KEY).address


def intent_signature(key: str = REDEEMER_KEY, message: str | None = None) -> bytes:
    digest = redemption_digest() if message is None else redemption_digest(message)
    return sign_redemption_intent(key, digest)
