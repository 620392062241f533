import logging
import sys
from typing import Any, Dict, List

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class EventLog:
    def __init__(self) -> None:
        self.records: List[Dict[str,Any]] = []
    def emit(self, rec: Dict[str,Any]) -> None:
        self.records.append(rec)
    def of_kind(self, *kinds: str) -> List[Dict[str,Any]]:
        return [r for r in self.records if r.get("a") in kinds]


def setup_logging(log_level: str = "WARNING") -> None:
    """Send diagnostics to stderr; stdout carries game commands only."""
    root_logger = logging.getLogger()
    if root_logger.handlers:
        return  # Already configured

    level = getattr(logging, log_level.upper(), logging.WARNING)
    root_logger.setLevel(level)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
    root_logger.addHandler(handler)

    logging.getLogger(__name__).info("Logging initialized (level=%s)", log_level)
