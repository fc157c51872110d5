"""
util/logs.py

Logging setup shared by the entry points (API server, CLI).
- LOG_LEVEL env selects the level (default INFO)
"""

import logging
import os


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def setup_logging(level=None):
    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO")
    if isinstance(level, str):
        level = level.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            level = "INFO"
    logging.basicConfig(level=level, format=LOG_FORMAT)
