import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(
    home: Path,
    level: str = "INFO",
    max_bytes: int = 5 * 1024 * 1024,
    backup_count: int = 3,
) -> None:
    """Configure unified jmxctl logging.

    Args:
        home: jmxctl home directory; the log file is ``home / "jmxctl.log"``
        level: Logging level name
        max_bytes: Rotate the log file once it reaches this size
        backup_count: Number of rotated files to keep
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    home.mkdir(parents=True, exist_ok=True)
    log_file = home / "jmxctl.log"

    root_logger = logging.getLogger("jmxctl")
    root_logger.setLevel(logging.getLevelName(level.upper()))

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=max_bytes,
        backupCount=backup_count,
    )
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(file_handler)

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name.

    Logging is configured once at the CLI entry point; library use without it simply
    propagates to whatever the host application configured.
    """
    return logging.getLogger(f"jmxctl.{name}")
