# osrs_items/logger.py
import logging
import os
import sys
from logging.handlers import RotatingFileHandler

DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# Third-party loggers that are only useful when debugging the scraper
NOISY_LOGGERS = ("urllib3", "charset_normalizer")

_configured = False


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() == "true"


def setup_logging():
    """
    Configure the root logger once per process from LOG_* environment
    variables. Later calls are no-ops.
    """
    global _configured
    if _configured:
        return

    level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    log_file = os.getenv("LOG_FILE", "logs/osrs_items.log")

    root = logging.getLogger()
    root.setLevel(level)
    formatter = logging.Formatter(os.getenv("LOG_FORMAT", DEFAULT_FORMAT))

    # Leave handlers alone if the host application (or pytest) installed some
    if not root.handlers:
        if _env_flag("LOG_TO_STDOUT", "true"):
            stream = logging.StreamHandler(sys.stdout)
            stream.setLevel(level)
            stream.setFormatter(formatter)
            root.addHandler(stream)

        if _env_flag("LOG_TO_FILE", "false"):
            try:
                log_dir = os.path.dirname(log_file)
                if log_dir:
                    os.makedirs(log_dir, exist_ok=True)
                rotating = RotatingFileHandler(
                    log_file,
                    maxBytes=int(os.getenv("LOG_MAX_BYTES", str(2 * 1024 * 1024))),
                    backupCount=int(os.getenv("LOG_BACKUPS", "3")),
                    encoding="utf-8",
                )
                rotating.setLevel(level)
                rotating.setFormatter(formatter)
                root.addHandler(rotating)
            except OSError as e:
                root.warning("Failed to initialize file logging at %s: %s", log_file, e)

    if level > logging.DEBUG:
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    _configured = True


def get_logger(name: str | None = None) -> logging.Logger:
    setup_logging()
    return logging.getLogger(name)
