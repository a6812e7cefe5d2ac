import logging

import colorlog

SEXPC_LOG = logging.getLogger("sexpc")

loggers = [SEXPC_LOG]


def init_logging(dbg: bool):
    level = logging.DEBUG if dbg else logging.INFO
    handler = colorlog.StreamHandler()
    handler.setFormatter(
        colorlog.ColoredFormatter(
            "%(log_color)s%(levelname)-7s%(reset)s %(purple)s%(name)-7s%(reset)s - %(asctime)s - %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    for logger in loggers:
        logger.setLevel(level)
        logger.addHandler(handler)
