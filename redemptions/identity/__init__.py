from .signature import (
    REDEEM_MESSAGE,
    recover_signer,
    redemption_digest,
    sign_redemption_intent,
)

__all__ = ["REDEEM_MESSAGE", "recover_signer", "redemption_digest", "sign_redemption_intent"]
