from .config_schema import ClatdConfig

__all__ = ["ClatdConfig"]
