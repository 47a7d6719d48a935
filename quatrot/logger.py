"""
Logger utility.
"""
import logging

from .utils import load_config


def _resolve_level(level):
    """Map an int or level name to a logging level, INFO for anything else."""
    if isinstance(level, bool):
        return logging.INFO
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if isinstance(resolved, int):
            return resolved
    return logging.INFO


def get_logger(name=None, level=None, config_path="quatrot.json"):
    """Retrieve a configured logger."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter('[%(asctime)s] [%(name)s] %(levelname)s: %(message)s')
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    if level is None:
        level = load_config(config_path).get('log_level', logging.INFO)
    logger.setLevel(_resolve_level(level))
    return logger
