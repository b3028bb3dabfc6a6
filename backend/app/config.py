# ENV vars like Gemini API key
import os
from dotenv import load_dotenv

load_dotenv()


def _csv(value: str):
    return [item.strip() for item in value.split(",") if item.strip()]


class Config:
    GEMINI_API_KEY = os.getenv("GEMINI_API_KEY", "")
    GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
    GEMINI_BASE_URL = os.getenv("GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta")
    GEMINI_TIMEOUT = float(os.getenv("GEMINI_TIMEOUT", "60"))
    CORS_ORIGINS = _csv(os.getenv("CORS_ORIGINS", "http://localhost:5173,http://localhost:3000"))
    DEFAULT_CANVAS_WIDTH = float(os.getenv("DEFAULT_CANVAS_WIDTH", "900"))
    MAX_SESSIONS = int(os.getenv("MAX_SESSIONS", "256"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    DEBUG = os.getenv("DEBUG", "false").lower() == "true"
