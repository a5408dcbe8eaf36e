"""Runtime configuration read from the environment."""
import os

APP_NAME = os.getenv("APP_NAME", "Split Ledger API")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

_origins_env = os.getenv("ALLOWED_ORIGINS", "")
ALLOWED_ORIGINS = [o.strip() for o in _origins_env.split(",") if o.strip()] if _origins_env else ["*"]

HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "8000"))
