"""Environment configuration for the agent hub server."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()  # load environment variables from .env file

VERSION = "0.1.0"

# =====================
# STORAGE
# =====================
DEFAULT_DB_PATH = Path(__file__).parent / "data" / "agents.db"
AGENTS_DB_PATH = Path(os.getenv("AGENTS_DB_PATH", str(DEFAULT_DB_PATH)))

# "sqlite" or "memory"
AGENT_STORE = os.getenv("AGENT_STORE", "sqlite").lower()

# =====================
# HTTP
# =====================
# comma-separated values for multiple origins, or "*" for all
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*").split(",")

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*" if "*" in CORS_ORIGINS else CORS_ORIGINS[0],
    "Access-Control-Allow-Headers": "Content-Type,X-Amz-Date,Authorization,X-Api-Key,X-Amz-Security-Token",
    "Access-Control-Allow-Methods": "GET,POST,PUT,DELETE,OPTIONS",
}

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))

# =====================
# LOGGING
# =====================
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
