from .settings import FactorySettings, get_settings

__all__ = ["FactorySettings", "get_settings"]
