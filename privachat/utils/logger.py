# privachat/utils/logger.py
"""
Shared "privachat" logger, level taken from Settings.log_level
"""

import logging
from privachat.config import settings

def setup_logger(level: str = None):
    """Configure the shared "privachat" logger"""

    level_name = (level or settings.log_level).upper()

    logger = logging.getLogger("privachat")
    logger.setLevel(getattr(logging, level_name, logging.INFO))

    # Avoid duplicate handlers on re-import
    if logger.handlers:
        return logger

    console_handler = logging.StreamHandler()
    console_handler.setLevel(getattr(logging, level_name, logging.INFO))

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    console_handler.setFormatter(formatter)

    logger.addHandler(console_handler)

    return logger

# Shared logger instance
logger = setup_logger()
