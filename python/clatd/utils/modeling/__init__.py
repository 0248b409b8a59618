from .config_tree import ConfigTree

__all__ = [
    "ConfigTree",
]
