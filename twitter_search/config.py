from dotenv import load_dotenv
import os

load_dotenv()

DEFAULT_API_BASE = 'https://api.twitter.com/'


class Config:
    TWITTER_API_BASE = os.getenv('TWITTER_API_BASE', DEFAULT_API_BASE)

    SEARCH_COUNT = int(os.getenv('SEARCH_COUNT', '10'))
    REQUEST_TIMEOUT = float(os.getenv('REQUEST_TIMEOUT', '10'))
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
