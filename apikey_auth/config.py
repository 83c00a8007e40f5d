import logging
import os


def get_log_level() -> str:
    level = os.environ.get("LOG_LEVEL", "INFO").upper()
    if not isinstance(logging.getLevelName(level), int):
        return "INFO"
    return level


def get_app_title() -> str:
    return os.environ.get("APP_TITLE", "apikey-auth")
