from .config import Config

BUSINESS_TIMEZONE = None
BUSINESS_UTC_OFFSET_MINUTES = 240
WORK_HOURS = dict(Config.WORK_HOURS)
DATA_START_DATE = "2025-02-04"
FALLBACK_MAX_MINUTES = 24 * 60
ONGOING_SPAN_CAP_MINUTES = None
WORK_ACTIVITY_KINDS = list(Config.WORK_ACTIVITY_KINDS)

DB_CONFIG = {
    "host": "localhost",
    "port": 3306,
    "user": "root",
    "password": "",
    "database": "attendance_test",
}

DEBUG = False
TESTING = True
LOG_LEVEL = "DEBUG"
