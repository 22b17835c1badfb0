import logging
import os
from typing import Optional

# Environment switch:
#   CONCENTRATION_LOG_LEVEL=DEBUG / INFO / WARNING / ERROR
# Logs go to stderr so they never mix with the board on stdout.
LOG_LEVEL = os.getenv("CONCENTRATION_LOG_LEVEL", "WARNING").upper()


def setup_logging(level: Optional[str] = None) -> None:
    """Call once at program start (cli.main and the Flask entrypoint)."""
    name = (level or LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.WARNING),
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
