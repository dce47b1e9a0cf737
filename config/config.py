import os


_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


def _flag(name: str, default: str) -> bool:
    value = os.getenv(name, default).strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name} must be one of 1/0/true/false/yes/no/on/off, got {value!r}")


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # memory | mysql
    STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "memory").lower()

    DB_CONFIG = {
        "host": os.getenv("DB_HOST", "localhost"),
        "port": int(os.getenv("DB_PORT", "3306")),
        "user": os.getenv("DB_USER", "root"),
        "password": os.getenv("DB_PASSWORD", ""),
        "database": os.getenv("DB_NAME", "attendance_tracker"),
    }

    # Applies database/schema.sql on startup (mysql backend only).
    AUTO_INIT_DB = _flag("AUTO_INIT_DB", "0")
    SEED_DEMO_DATA = _flag("SEED_DEMO_DATA", "1")

    # Check-ins at or after this time are marked late.
    WORK_START_TIME = os.getenv("WORK_START_TIME", "09:00")
