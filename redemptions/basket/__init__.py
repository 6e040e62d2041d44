from .registry import BasketRegistry

__all__ = ["BasketRegistry"]
