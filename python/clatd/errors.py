class BaseClatdError(Exception):
    """Base class for all errors used in clatd."""
