from __future__ import annotations

from typing import Optional

from clatd.datamodel import ClatdConfig
from clatd.logging import get_logger

logger = get_logger(__name__)


class ConfigStore:
    """
    Holder of the configuration snapshot of the process.

    The snapshot is only ever replaced as a whole, never modified in place.
    """

    def __init__(self, initial_config: Optional[ClatdConfig] = None):
        self._config = initial_config

    def replace(self, config: ClatdConfig) -> None:
        if self._config is not None:
            logger.debug("Replacing the configuration of interface %s", self._config.uplink_interface_name)
        self._config = config

    def get(self) -> ClatdConfig:
        if self._config is None:
            raise RuntimeError("configuration has not been assembled")
        return self._config
