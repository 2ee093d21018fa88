import os

from .config import Config, env_bool

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

GEMINI_API_KEY = Config.GEMINI_API_KEY
GEMINI_MODEL = Config.GEMINI_MODEL
INSIGHT_TIMEOUT_SECONDS = Config.INSIGHT_TIMEOUT_SECONDS
INSIGHT_WORKERS = Config.INSIGHT_WORKERS

# Demo data stays off unless asked for explicitly
SEED_DEMO_DATA = env_bool("SEED_DEMO_DATA", False)
DEMO_SEED = Config.DEMO_SEED
DEMO_HISTORY_DAYS = Config.DEMO_HISTORY_DAYS
TREND_WINDOW_DAYS = Config.TREND_WINDOW_DAYS

DEBUG = False
LOG_LEVEL = Config.LOG_LEVEL
