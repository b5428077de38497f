import logging
import os
from datetime import datetime

from config.settings import settings

# Create logs directory
os.makedirs(settings.LOG_DIR, exist_ok=True)

LOG_FILE = os.path.join(settings.LOG_DIR, f"aeropulse_{datetime.now().date()}.log")

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[
        logging.FileHandler(LOG_FILE),
        logging.StreamHandler()
    ]
)

logger = logging.getLogger("AEROPULSE")
