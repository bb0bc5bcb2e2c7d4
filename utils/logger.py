import logging
import os
from pathlib import Path
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOGS_DIR_ENV = "FONT_EXTRACTOR_LOG_DIR"


def setup_logger(name: str, log_level: Optional[int] = None) -> logging.Logger:
    """
    Configure and return a logger for a font extractor module.

    Messages go to the console from INFO up and to logs/<name>.log from
    DEBUG up. The log directory can be moved with FONT_EXTRACTOR_LOG_DIR.

    Args:
        name: Name for the logger, usually the module's __name__
        log_level: Optional logging level (defaults to DEBUG)

    Returns:
        Configured logger instance
    """
    logs_dir = Path(os.environ.get(LOGS_DIR_ENV, "logs"))
    logs_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(name)
    logger.setLevel(log_level or logging.DEBUG)

    # Re-importing a module must not stack handlers
    logger.handlers = []

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)

    file_handler = logging.FileHandler(logs_dir / f'{name}.log', mode='a', encoding='utf-8')
    file_handler.setLevel(logging.DEBUG)

    formatter = logging.Formatter(LOG_FORMAT)
    console_handler.setFormatter(formatter)
    file_handler.setFormatter(formatter)

    logger.addHandler(console_handler)
    logger.addHandler(file_handler)

    return logger
