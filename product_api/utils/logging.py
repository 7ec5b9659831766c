# product_api/utils/logging.py
import logging
import sys

from product_api.utils.settings import LOG_LEVEL

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _root_logger() -> logging.Logger:
    root = logging.getLogger("product_api")
    # handler tylko raz, nawet przy wielokrotnym imporcie
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        root.addHandler(handler)
        root.setLevel(LOG_LEVEL)
    return root


def get_logger(name: str) -> logging.Logger:
    _root_logger()
    if not name.startswith("product_api"):
        name = f"product_api.{name}"
    return logging.getLogger(name)
