import os


def _env_int(name: str, default: int) -> int:
    return int(os.environ.get(name, str(default)))


_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


def env_bool(name: str, default: bool) -> bool:
    """Read a flag such as 1/0, true/false, yes/no or on/off."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")


class Config:
    """Defaults shared by every environment, overridable from the environment / .env."""

    SECRET_KEY = os.environ.get("SECRET_KEY") or "dev-secret-key"

    # Text generation (Google Gemini)
    GEMINI_API_KEY = os.environ.get("GEMINI_API_KEY", os.environ.get("API_KEY", ""))
    GEMINI_MODEL = os.environ.get("GEMINI_MODEL", "gemini-3-flash-preview")
    INSIGHT_TIMEOUT_SECONDS = float(os.environ.get("INSIGHT_TIMEOUT_SECONDS", "30"))
    INSIGHT_WORKERS = _env_int("INSIGHT_WORKERS", 2)

    # Demo bootstrap
    SEED_DEMO_DATA = env_bool("SEED_DEMO_DATA", True)
    DEMO_SEED = int(os.environ["DEMO_SEED"]) if os.environ.get("DEMO_SEED") else None
    DEMO_HISTORY_DAYS = _env_int("DEMO_HISTORY_DAYS", 30)

    TREND_WINDOW_DAYS = _env_int("TREND_WINDOW_DAYS", 7)
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
