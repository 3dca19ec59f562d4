import logging
import logging.handlers

from utility.config import settings

logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger("psy_supply")

file_handler = logging.handlers.RotatingFileHandler(settings.LOG_FILE, maxBytes=5*1024*1024, backupCount=3)
file_handler.setLevel(settings.LOG_LEVEL)
file_handler.setFormatter(logging.Formatter("%(asctime)s - %(levelname)s - %(message)s"))

logger.addHandler(file_handler)
