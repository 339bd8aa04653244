import logging
from typing import List, Optional

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


# PUBLIC_INTERFACE
def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Configure root logging for the service.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path of a file that receives a copy of the log.
    """
    handlers: List[logging.Handler] = [
        # Console Handler (for quick viewing in terminal)
        logging.StreamHandler(),
    ]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
