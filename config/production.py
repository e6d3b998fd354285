import os

from .config import DB_CONFIG, Config

BUSINESS_TIMEZONE = Config.BUSINESS_TIMEZONE
BUSINESS_UTC_OFFSET_MINUTES = Config.BUSINESS_UTC_OFFSET_MINUTES
WORK_HOURS = Config.WORK_HOURS
DATA_START_DATE = Config.DATA_START_DATE
FALLBACK_MAX_MINUTES = Config.FALLBACK_MAX_MINUTES
# Open spans credit at most this many minutes past their start (unset: up to as_of).
ONGOING_SPAN_CAP_MINUTES = Config.ONGOING_SPAN_CAP_MINUTES
WORK_ACTIVITY_KINDS = Config.WORK_ACTIVITY_KINDS

DB_CONFIG = dict(DB_CONFIG)

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
