from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

# Silent as a library until an entry point opts in.
logger.disable("mlopsroi")


def configure_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    logger.remove()
    logger.enable("mlopsroi")
    logger.add(sys.stderr, level=level.upper())
    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            path,
            rotation="10 MB",
            retention=10,
            backtrace=True,
            level=level.upper(),
        )
