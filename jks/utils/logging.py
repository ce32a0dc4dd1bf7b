"""
Logging setup
"""

import logging
import sys


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(name: str = "jks") -> logging.Logger:
    """
    Return a logger under the top-level package logger.

    Only the top-level logger ("jks") gets a level and a stdout handler;
    module loggers such as "jks.lexer.lexer" inherit both, so
    logging.getLogger("jks").setLevel(logging.DEBUG) turns on debug output
    for the whole package.
    """
    root_name = name.split(".", 1)[0]
    root = logging.getLogger(root_name)
    if not root.handlers:
        root.setLevel(logging.INFO)
        handler = logging.StreamHandler(stream=sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    return logging.getLogger(name)
