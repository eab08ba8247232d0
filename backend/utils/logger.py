"""Shared "voterbot" logger; modules log through named children of it."""
import logging

logger = logging.getLogger("voterbot")
if not logger.handlers:
    h = logging.StreamHandler()
    fmt = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
    h.setFormatter(fmt)
    logger.addHandler(h)
    logger.setLevel(logging.INFO)
    logger.propagate = False

def get_logger(name: str = None):
    return logger.getChild(name) if name else logger
