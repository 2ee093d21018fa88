import os

from .config import Config, env_bool

SECRET_KEY = Config.SECRET_KEY

GEMINI_API_KEY = Config.GEMINI_API_KEY
GEMINI_MODEL = Config.GEMINI_MODEL
INSIGHT_TIMEOUT_SECONDS = Config.INSIGHT_TIMEOUT_SECONDS
INSIGHT_WORKERS = Config.INSIGHT_WORKERS

SEED_DEMO_DATA = Config.SEED_DEMO_DATA
DEMO_SEED = Config.DEMO_SEED
DEMO_HISTORY_DAYS = Config.DEMO_HISTORY_DAYS
TREND_WINDOW_DAYS = Config.TREND_WINDOW_DAYS

DEBUG = env_bool("DEBUG", True)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "DEBUG").upper()
