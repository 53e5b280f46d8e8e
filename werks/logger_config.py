import logging
from pathlib import Path
from typing import Optional

from .config import Config

def setup_logging(level: Optional[str] = None) -> None:
    """Configure logging for command-line use of the library."""
    handlers = [
        # Console handler
        logging.StreamHandler(),
    ]

    # File handler, only when a log file is configured
    if Config.LOG_FILE:
        log_path = Path(Config.LOG_FILE)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path))

    # Configure root logger
    logging.basicConfig(
        level=(level or Config.LOG_LEVEL).upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers
    )

    # Reduce logging level for some third-party libraries
    logging.getLogger("shapely").setLevel(logging.WARNING)
    logging.getLogger("matplotlib").setLevel(logging.WARNING)
