"""Environment variable configuration."""

import logging
import os

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

PLACEHOLDER_TOKEN = "your-token-here"
DEFAULT_PAGE_SIZE = 8

# telegram rejects callback data longer than this
CALLBACK_DATA_LIMIT = 64

CONVERSATION_TIMEOUT = 120


def get_bot_token():
    token = os.getenv("TELEGRAM_BOT_TOKEN")
    if not token or token == PLACEHOLDER_TOKEN:
        return None
    return token


def get_log_level():
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_page_size():
    raw = os.getenv("TECHNIQUES_PAGE_SIZE")
    if raw is None:
        return DEFAULT_PAGE_SIZE
    try:
        size = int(raw)
    except ValueError:
        logger.warning("TECHNIQUES_PAGE_SIZE=%r is not a number, using %d", raw, DEFAULT_PAGE_SIZE)
        return DEFAULT_PAGE_SIZE
    if size < 1:
        logger.warning("TECHNIQUES_PAGE_SIZE must be positive, using %d", DEFAULT_PAGE_SIZE)
        return DEFAULT_PAGE_SIZE
    return size
