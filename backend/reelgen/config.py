import os
from dotenv import load_dotenv

# Load .env from project root
load_dotenv()

LLM_API_KEY = os.getenv("LLM_API_KEY", "")
LLM_BASE_URL = os.getenv("LLM_BASE_URL", "https://ai.gateway.lovable.dev/v1")
LLM_MODEL = os.getenv("LLM_MODEL", "google/gemini-3-flash-preview")
LLM_TEMPERATURE = float(os.getenv("LLM_TEMPERATURE", "0.8"))
LLM_TIMEOUT = float(os.getenv("LLM_TIMEOUT", "120"))

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./reels.db")

CORS_ALLOW_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")
    if origin.strip()
]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
