import logging

import colorlog

from sales_api.core.settings import settings

LOG_FORMAT = "%(log_color)s%(levelname)-8s%(reset)s %(asctime)s %(cyan)s%(name)s%(reset)s | %(message)s"


def build_logger(name: str, level: str) -> logging.Logger:
    """Named logger with a single colored stderr handler; safe to call twice."""
    log = logging.getLogger(name)
    log.setLevel(level)
    log.propagate = False
    if not log.handlers:
        handler = colorlog.StreamHandler()
        handler.setFormatter(
            colorlog.ColoredFormatter(
                LOG_FORMAT,
                datefmt="%H:%M:%S",
                log_colors={**colorlog.default_log_colors, "DEBUG": "white", "CRITICAL": "bold_red"},
            )
        )
        log.addHandler(handler)
    return log


logger = build_logger("sales_api", settings.LOG_LEVEL)
