import os

from .config import Config, _flag

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
STORAGE_BACKEND = Config.STORAGE_BACKEND
DB_CONFIG = Config.DB_CONFIG
WORK_START_TIME = Config.WORK_START_TIME

DEBUG = False

AUTO_INIT_DB = Config.AUTO_INIT_DB
SEED_DEMO_DATA = _flag("SEED_DEMO_DATA", "0")
