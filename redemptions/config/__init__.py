from .settings import MAX_BASKET_SIZE, Settings, load_settings

__all__ = ["MAX_BASKET_SIZE", "Settings", "load_settings"]
