import logging
from typing import Optional

from .config import Config

logger = logging.getLogger('twitter_search')


def configure_logging(level: Optional[str] = None):
    level = (level or Config.LOG_LEVEL).upper()
    logging.basicConfig(level=getattr(logging, level, logging.INFO))
