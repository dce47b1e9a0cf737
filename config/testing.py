from .config import Config

SECRET_KEY = "test-secret"
LOG_LEVEL = "DEBUG"
STORAGE_BACKEND = "memory"
DB_CONFIG = Config.DB_CONFIG
WORK_START_TIME = "09:00"

DEBUG = False
TESTING = True

AUTO_INIT_DB = False
SEED_DEMO_DATA = True
