"""
Recover the redeemer from a personal-sign signature over the redemption-intent digest.

Requests can reach the engine through a forwarder, so the immediate caller is not
the principal. Instead the holder signs a constant phrase with a standard wallet
(EIP-191 ``personal_sign``) and the signer address is recovered here.
"""
from __future__ import annotations

from eth_account import Account
from eth_account.messages import encode_defunct
from eth_keys.exceptions import BadSignature
from eth_keys.exceptions import ValidationError as KeyValidationError
from web3 import Web3

from redemptions.domain.models import ZERO_ADDRESS

REDEEM_MESSAGE = "I would like to redeem"
SIGNATURE_LENGTH = 65


def redemption_digest(message: str = REDEEM_MESSAGE) -> bytes:
    return bytes(Web3.keccak(text=message))


def _signature_bytes(signature: bytes | str) -> bytes | None:
    if isinstance(signature, str):
        try:
            raw = Web3.to_bytes(hexstr=signature)
        except ValueError:
            return None
    elif isinstance(signature, (bytes, bytearray)):
        raw = bytes(signature)
    else:
        return None
    if len(raw) != SIGNATURE_LENGTH:
        return None
    v = raw[-1]
    if v < 27:
        v += 27
    if v not in (27, 28):
        return None
    return raw[:-1] + bytes([v])


def recover_signer(digest: bytes, signature: bytes | str) -> str:
    """Return the checksum address that signed ``digest``, or ``ZERO_ADDRESS`` if malformed."""
    raw = _signature_bytes(signature)
    if raw is None:
        return ZERO_ADDRESS
    try:
        return Account.recover_message(encode_defunct(primitive=bytes(digest)), signature=raw)
    except (ValueError, BadSignature, KeyValidationError):
        return ZERO_ADDRESS


def sign_redemption_intent(private_key: bytes | str, digest: bytes) -> bytes:
    signed = Account.sign_message(encode_defunct(primitive=bytes(digest)), private_key=private_key)
    return bytes(signed.signature)
