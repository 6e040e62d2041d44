from __future__ import annotations


class RedemptionsError(Exception):
    """Base class for every rejection raised by the redemptions core."""

    code = "REDEMPTIONS_ERROR"

    def __init__(self, message: str | None = None):
        self.message = message or self.code
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.message == self.code:
            return self.code
        return f"{self.code}: {self.message}"


class ConfigurationError(RedemptionsError):
    code = "REDEMPTIONS_CONFIGURATION"


class ValidationError(RedemptionsError):
    code = "REDEMPTIONS_VALIDATION"


class ZeroAmount(ValidationError):
    code = "REDEMPTIONS_CANNOT_REDEEM_ZERO"


class InvalidAmount(ValidationError):
    code = "REDEMPTIONS_INVALID_AMOUNT"


class InvalidSignature(ValidationError):
    code = "REDEMPTIONS_INVALID_SIGNATURE"


class InvalidAsset(ValidationError):
    code = "REDEMPTIONS_INVALID_TOKEN"


class NotAContract(InvalidAsset):
    code = "REDEMPTIONS_TOKEN_NOT_CONTRACT"


class ForbiddenAsset(ValidationError):
    code = "REDEMPTIONS_REDEEMABLE_TOKEN"


class AlreadyMember(ValidationError):
    code = "REDEMPTIONS_TOKEN_ALREADY_ADDED"


class NotAMember(ValidationError):
    code = "REDEMPTIONS_NOT_VAULT_TOKEN"


class BasketFull(ValidationError):
    code = "REDEMPTIONS_REDEEMABLE_TOKEN_LIST_FULL"


class InsufficientFundsError(RedemptionsError):
    code = "REDEMPTIONS_INSUFFICIENT_BALANCE"


class RedemptionArithmeticError(RedemptionsError, ArithmeticError):
    code = "REDEMPTIONS_ARITHMETIC"


class ArithmeticOverflow(RedemptionArithmeticError, OverflowError):
    code = "MATH_MUL_OVERFLOW"


class DivisionByZero(RedemptionArithmeticError, ZeroDivisionError):
    code = "MATH_DIV_ZERO"


class CollaboratorFailure(RedemptionsError):
    code = "REDEMPTIONS_COLLABORATOR_FAILURE"


class PermissionDenied(RedemptionsError):
    code = "APP_AUTH_FAILED"


class ReentrancyError(RedemptionsError):
    code = "REENTRANCY_REENTRANT_CALL"
