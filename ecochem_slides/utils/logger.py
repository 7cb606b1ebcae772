"""
Logging setup shared by the app and services
"""
import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logger(name: str = "root", log_file: Optional[str] = None, level: str = "INFO") -> logging.Logger:
    """
    Configure a logger with console and optional file output

    Args:
        name: Logger name, "root" configures the root logger
        log_file: Optional path of the log file
        level: Logging level name

    Returns:
        Configured logger
    """
    logger = logging.getLogger() if name == "root" else logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Streamlit reruns the script, avoid stacking handlers
    if getattr(logger, "_slides_configured", False):
        return logger

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    logger.addHandler(console)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger._slides_configured = True
    return logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
