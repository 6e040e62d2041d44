from .app import build_redemptions

__all__ = ["build_redemptions"]
