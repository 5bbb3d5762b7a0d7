# utils/logger.py
import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

def setup_logger(log_dir: str | Path = "data/logs") -> logging.Logger:
    """
    Attach handlers to the "shopping" logger and return it.

    Cart edits (shopping.cart), store recovery warnings (shopping.store)
    and purchases or rollbacks (shopping.service) all end up in
    <log_dir>/shopping.log, rotated at midnight with a week of history,
    and on the console. Handlers are attached once per process, so
    main() and tests can call this freely.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger("shopping")
    logger.setLevel(logging.INFO)
    if logger.handlers:
        return logger

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [
        TimedRotatingFileHandler(
            filename=log_dir / "shopping.log",
            when="midnight",
            backupCount=7,
            encoding="utf-8",
        ),
        logging.StreamHandler(),
    ]
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info(f"Logging to {log_dir / 'shopping.log'}")
    return logger
