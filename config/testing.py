SECRET_KEY = "test-secret"

# Never reach the hosted model from tests
GEMINI_API_KEY = ""
GEMINI_MODEL = "gemini-3-flash-preview"
INSIGHT_TIMEOUT_SECONDS = 1.0
INSIGHT_WORKERS = 1

SEED_DEMO_DATA = False
DEMO_SEED = 0
DEMO_HISTORY_DAYS = 30
TREND_WINDOW_DAYS = 7

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
