from __future__ import annotations

import sys

from .args import parse_args
from .config.assembler import dump_config, read_config
from .config.store import ConfigStore
from .logging import get_logger, start_logging

logger = get_logger(__name__)


def main() -> None:
    args = parse_args()
    start_logging(args)

    logger.notice("Starting clatd on %s...", args.interface)

    res = read_config(args.config, args.interface, args.plat_prefix, args.netid)
    if res.is_err():
        logger.fatal("Configuration failed: %s", res.unwrap_err())
        sys.exit(1)

    store = ConfigStore()
    store.replace(res.unwrap())
    dump_config(store.get())
