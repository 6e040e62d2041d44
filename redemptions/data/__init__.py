from .basket_store import BasketStore

__all__ = ["BasketStore"]
