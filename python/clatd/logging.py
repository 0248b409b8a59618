from __future__ import annotations

import logging
import logging.handlers
import os
import sys
from enum import Enum
from typing import TYPE_CHECKING, Any, Literal, cast

if TYPE_CHECKING:
    from .args import ClatdArgs


LogLevelEnum = Literal["fatal", "error", "warning", "notice", "info", "debug"]
LogTargetEnum = Literal["stdout", "stderr", "syslog"]


class LogTarget(str, Enum):
    STDOUT = "stdout"
    SYSLOG = "syslog"
    STDERR = "stderr"


FATAL = logging.CRITICAL
NOTICE = (logging.WARNING + logging.INFO) // 2

_config_to_level = {
    "fatal": FATAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "notice": NOTICE,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}

_level_to_name = {
    FATAL: "FATL",
    logging.ERROR: "ERRO",
    logging.WARNING: "WARN",
    NOTICE: "NOTI",
    logging.INFO: "INFO",
    logging.DEBUG: "DEBG",
}


class ClatdLogger(logging.Logger):
    def notice(self, message: str, *args: Any, **kwargs: Any) -> None:
        if self.isEnabledFor(NOTICE):
            self._log(NOTICE, message, args, **kwargs)

    def fatal(self, message: str, *args: Any, **kwargs: Any) -> None:  # type: ignore[override]
        if self.isEnabledFor(FATAL):
            self._log(FATAL, message, args, **kwargs)


logging.setLoggerClass(ClatdLogger)


for level, name in _level_to_name.items():
    logging.addLevelName(level, name)


def get_logger(name: str) -> ClatdLogger:
    return cast(ClatdLogger, logging.getLogger(name))


NO_PREFIX_FORMAT_ENV_VAR = "CLATD_LOGGING_NO_PREFIX_FORMAT"

BASIC_FORMAT = "%(name)s: %(message)s"
NO_PREFIX_FORMAT = f"[%(levelname)s] {BASIC_FORMAT}"


def get_pretty_format(stream: str) -> str:
    return f"%(asctime)s clatd[%(process)d]{stream}: [%(levelname)s] {BASIC_FORMAT}"


def get_formatter(target: LogTarget) -> logging.Formatter:
    no_prefix = bool(os.environ.get(NO_PREFIX_FORMAT_ENV_VAR) == "true")

    if target == LogTarget.SYSLOG:
        return logging.Formatter(BASIC_FORMAT)
    if no_prefix:
        return logging.Formatter(NO_PREFIX_FORMAT)

    stream = ""
    if target == LogTarget.STDERR:
        stream = "(stderr)"
    return logging.Formatter(get_pretty_format(stream))


def get_logging_handler(target: LogTarget) -> logging.Handler:
    if target == LogTarget.SYSLOG:
        return logging.handlers.SysLogHandler(address="/dev/log")
    if target == LogTarget.STDERR:
        return logging.StreamHandler(sys.stderr)
    return logging.StreamHandler(sys.stdout)


def start_logging(args: ClatdArgs) -> None:
    level = _config_to_level[args.loglevel]
    target = LogTarget(args.logtarget)

    handler = get_logging_handler(target)
    handler.setFormatter(get_formatter(target))

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(logging.handlers.MemoryHandler(10_000, level, handler))
