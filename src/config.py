"""Configuration module for the Campus Portal backend.

This module provides centralized configuration management, including directory
paths, database and API server settings, identity transport, and the
enumerations shared by models, schemas and managers. All configuration values
can be overridden via environment variables.
"""

import os
from pathlib import Path
from typing import List, Tuple

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# --- Directory Configuration ---

# Root directory of the project
ROOT_DIR = Path(__file__).parent.parent.resolve()

# Data directory (holds the SQLite database file)
DATA_DIR = Path(os.getenv("DATA_DIR", str(ROOT_DIR / "data")))

# --- Database Configuration ---

DATABASE_URL: str = os.getenv(
    "DATABASE_URL", f"sqlite:///{DATA_DIR}/campus_portal.db"
)

# --- API Server Configuration ---

API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
API_PORT: int = int(os.getenv("API_PORT", "5000"))

# CORS allowed origins (comma-separated list)
# Default includes local development addresses of the dashboard frontend.
_CORS_ALLOWED_ORIGINS_STR: str = os.getenv(
    "CORS_ALLOWED_ORIGINS",
    "http://localhost:5173,http://127.0.0.1:5173,http://localhost:8080,"
    "http://127.0.0.1:8080,http://localhost:3000",
)
CORS_ALLOWED_ORIGINS: List[str] = [
    origin.strip()
    for origin in _CORS_ALLOWED_ORIGINS_STR.split(",")
    if origin.strip()
]

# --- Identity Configuration ---

# "header": trust the x-user-id / x-user-role headers sent by the client.
# "token": require a signed JWT bearer token whose subject is the user id.
IDENTITY_MODE: str = os.getenv("IDENTITY_MODE", "header").lower()

USER_ID_HEADER: str = os.getenv("USER_ID_HEADER", "x-user-id")
USER_ROLE_HEADER: str = os.getenv("USER_ROLE_HEADER", "x-user-role")

JWT_SECRET_KEY: str = os.getenv("JWT_SECRET_KEY", "your-secret-key-change-in-production")
JWT_ALGORITHM: str = os.getenv("JWT_ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES: int = int(
    os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24 * 7))  # 7 days
)

# Minimum gap between two writes of a user's last_active timestamp
LAST_ACTIVE_INTERVAL_SECONDS: int = int(os.getenv("LAST_ACTIVE_INTERVAL_SECONDS", "300"))

# --- Client Configuration ---

CLIENT_API_URL: str = os.getenv("CLIENT_API_URL", "http://localhost:5000/api")
CLIENT_TIMEOUT_SECONDS: float = float(os.getenv("CLIENT_TIMEOUT_SECONDS", "10"))

# --- Logging Configuration ---

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# --- Domain Enumerations ---

ROLES: Tuple[str, ...] = ("student", "professor", "club", "admin")
USER_STATUSES: Tuple[str, ...] = ("active", "inactive", "suspended")
ACTIVE_STATUS: str = "active"
