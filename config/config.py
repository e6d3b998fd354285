import os


def env_int(name: str, default):
    value = os.environ.get(name, "")
    return int(value) if value.strip() else default


def env_list(name: str, default):
    value = os.environ.get(name, "")
    if not value.strip():
        return default
    return [item.strip() for item in value.split(",") if item.strip()]


class Config:
    # Business calendar (Asia/Dubai, fixed UTC+04:00)
    BUSINESS_TIMEZONE = os.environ.get("BUSINESS_TIMEZONE") or None
    BUSINESS_UTC_OFFSET_MINUTES = env_int("BUSINESS_UTC_OFFSET_MINUTES", 240)
    WORK_HOURS = {
        "monday": ("10:00", "19:00"),
        "tuesday": ("10:00", "19:00"),
        "wednesday": ("10:00", "19:00"),
        "thursday": ("10:00", "19:00"),
        "friday": ("10:00", "19:00"),
        "saturday": ("10:00", "14:00"),
        "sunday": None,
    }

    # Data trust rules
    DATA_START_DATE = os.environ.get("DATA_START_DATE", "2025-02-04")
    FALLBACK_MAX_MINUTES = env_int("FALLBACK_MAX_MINUTES", 24 * 60)
    ONGOING_SPAN_CAP_MINUTES = env_int("ONGOING_SPAN_CAP_MINUTES", None)
    WORK_ACTIVITY_KINDS = env_list(
        "WORK_ACTIVITY_KINDS",
        [
            "data_collection",
            "customer_followup",
            "calling_telecalling",
            "calling_coldcalling",
            "calling_calllist_movement",
            "client_meeting",
            "admin_documentation",
            "training",
            "system_bank_portal",
        ],
    )

    # Database
    DB_USER = os.environ.get("DB_USER", "root")
    DB_PASSWORD = os.environ.get("DB_PASSWORD", "")
    DB_HOST = os.environ.get("DB_HOST", "localhost")
    DB_PORT = env_int("DB_PORT", 3306)
    DB_NAME = os.environ.get("DB_NAME", "attendance_db")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")


DB_CONFIG = {
    "host": Config.DB_HOST,
    "port": Config.DB_PORT,
    "user": Config.DB_USER,
    "password": Config.DB_PASSWORD,
    "database": Config.DB_NAME,
}
