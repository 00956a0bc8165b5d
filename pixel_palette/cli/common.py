import logging
import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables first
load_dotenv()


def configure_logging(verbose: bool = False) -> None:
    """
    Centralized logging configuration, run once per entry point before any
    service logs. LOG_LEVEL picks the level, --verbose forces DEBUG.
    """
    level = logging.DEBUG if verbose else os.getenv("LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s',
        datefmt='%H:%M:%S'
    )


def require_file(path: str | Path) -> bool:
    """Print the not-found message for a missing input and report success."""
    if not Path(path).is_file():
        print(f"Error: File '{path}' not found!")
        return False
    return True
