from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Sequence

from .constants import CONFIG_FILE, NETID_UNSET, VERSION
from .logging import LogLevelEnum, LogTargetEnum


@dataclass
class ClatdArgs:
    interface: str
    plat_prefix: str | None
    netid: int
    config: str
    loglevel: LogLevelEnum
    logtarget: LogTargetEnum


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="464xlat CLAT daemon: translates the host's IPv4 traffic to IPv6 through a NAT64 PLAT.",
    )
    parser.add_argument(
        "-V",
        "--version",
        help="Get version",
        action="version",
        version=VERSION,
    )
    parser.add_argument(
        "-i",
        "--interface",
        help="Uplink interface providing IPv6 connectivity and the local address space.",
        type=str,
        required=True,
    )
    parser.add_argument(
        "-p",
        "--plat-prefix",
        help="Optional, PLAT prefix to use instead of the configuration file or DNS64 discovery.",
        type=str,
        default=None,
    )
    parser.add_argument(
        "-n",
        "--netid",
        help="Optional, network identifier used for DNS64 discovery queries.",
        type=int,
        default=NETID_UNSET,
    )
    parser.add_argument(
        "-c",
        "--config",
        help="Optional, path to the configuration file (clatd.conf, YAML or JSON).",
        type=str,
        default=str(CONFIG_FILE),
    )
    parser.add_argument(
        "--loglevel",
        default="notice",
        choices=["debug", "info", "notice", "warning", "error", "fatal"],
        help="Logging level.",
    )
    parser.add_argument(
        "--logtarget",
        default="stderr",
        choices=["stdout", "stderr", "syslog"],
        help="Logging target.",
    )
    return parser


def parse_args(argv: Sequence[str] | None = None) -> ClatdArgs:
    args_ns = create_parser().parse_args(argv)
    return ClatdArgs(**vars(args_ns))
