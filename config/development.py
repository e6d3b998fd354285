from .config import DB_CONFIG, Config

BUSINESS_TIMEZONE = Config.BUSINESS_TIMEZONE
BUSINESS_UTC_OFFSET_MINUTES = Config.BUSINESS_UTC_OFFSET_MINUTES
WORK_HOURS = Config.WORK_HOURS
DATA_START_DATE = Config.DATA_START_DATE
FALLBACK_MAX_MINUTES = Config.FALLBACK_MAX_MINUTES
ONGOING_SPAN_CAP_MINUTES = Config.ONGOING_SPAN_CAP_MINUTES
WORK_ACTIVITY_KINDS = Config.WORK_ACTIVITY_KINDS

DB_CONFIG = dict(DB_CONFIG)

DEBUG = True
LOG_LEVEL = "DEBUG"
