from .config import Config

SECRET_KEY = Config.SECRET_KEY
LOG_LEVEL = Config.LOG_LEVEL
STORAGE_BACKEND = Config.STORAGE_BACKEND
DB_CONFIG = Config.DB_CONFIG
WORK_START_TIME = Config.WORK_START_TIME

DEBUG = True

AUTO_INIT_DB = Config.AUTO_INIT_DB
SEED_DEMO_DATA = Config.SEED_DEMO_DATA
