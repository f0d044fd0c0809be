"""
Logging configuration.
"""
import logging
import sys

from agentic_maintainer.config import settings

level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

# Create logger
logger = logging.getLogger("agentic_maintainer")
logger.setLevel(level)

# Console handler
console_handler = logging.StreamHandler(sys.stdout)
console_handler.setLevel(level)

# Formatter
formatter = logging.Formatter(
    "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)
console_handler.setFormatter(formatter)

# Add handler
if not logger.handlers:
    logger.addHandler(console_handler)
