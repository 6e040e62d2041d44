from .errors import (
    AlreadyMember,
    ArithmeticOverflow,
    BasketFull,
    CollaboratorFailure,
    ConfigurationError,
    DivisionByZero,
    ForbiddenAsset,
    InsufficientFundsError,
    InvalidAmount,
    InvalidAsset,
    InvalidSignature,
    NotAContract,
    NotAMember,
    PermissionDenied,
    ReentrancyError,
    RedemptionArithmeticError,
    RedemptionsError,
    ValidationError,
    ZeroAmount,
)
from .models import (
    ADD_TOKEN_ROLE,
    ANY_ENTITY,
    ETH,
    REDEEM_ROLE,
    REMOVE_TOKEN_ROLE,
    UINT256_MAX,
    ZERO_ADDRESS,
    AssetAdded,
    AssetRemoved,
    Payout,
    Redeemed,
    RedemptionReceipt,
    to_address,
    to_uint256,
)

__all__ = [
    "AlreadyMember",
    "ArithmeticOverflow",
    "BasketFull",
    "CollaboratorFailure",
    "ConfigurationError",
    "DivisionByZero",
    "ForbiddenAsset",
    "InsufficientFundsError",
    "InvalidAmount",
    "InvalidAsset",
    "InvalidSignature",
    "NotAContract",
    "NotAMember",
    "PermissionDenied",
    "ReentrancyError",
    "RedemptionArithmeticError",
    "RedemptionsError",
    "ValidationError",
    "ZeroAmount",
    "ADD_TOKEN_ROLE",
    "ANY_ENTITY",
    "ETH",
    "REDEEM_ROLE",
    "REMOVE_TOKEN_ROLE",
    "UINT256_MAX",
    "ZERO_ADDRESS",
    "AssetAdded",
    "AssetRemoved",
    "Payout",
    "Redeemed",
    "RedemptionReceipt",
    "to_address",
    "to_uint256",
]
