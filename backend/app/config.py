import os
from importlib.util import find_spec
from dotenv import load_dotenv

# Load .env file
load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./interview.db")
SQL_ECHO = os.getenv("SQL_ECHO", "0").lower() in ("1", "true", "yes")

GEMINI_API_KEY = os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLEGEMINI_API_KEY", "")
LLM_MODE = os.getenv("LLM_MODE", "gemini" if GEMINI_API_KEY else "mock").lower()

# Priority order; first model that returns parseable JSON wins
GEMINI_MODELS = [
    m.strip()
    for m in os.getenv("GEMINI_MODELS", "gemini-2.5-flash,gemini-2.5-flash-lite,gemini-2.0-flash").split(",")
    if m.strip()
]

AI_REQUEST_TIMEOUT_SECONDS = float(os.getenv("AI_REQUEST_TIMEOUT_SECONDS", "30"))
# 0 disables the aggregate deadline across model attempts
AI_DEADLINE_SECONDS = float(os.getenv("AI_DEADLINE_SECONDS", "0"))

MAX_UPLOAD_BYTES = int(os.getenv("MAX_UPLOAD_BYTES", str(10 * 1024 * 1024)))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# OCR needs both packages plus the tesseract binary at runtime
OCR_AVAILABLE = find_spec("pytesseract") is not None and find_spec("pdf2image") is not None
