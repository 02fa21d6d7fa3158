import os

# Database (async SQLAlchemy URL; a file path for SQLite)
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./db/swimlanes.db")

# Detect environment (default to production)
ENV = os.getenv("APP_ENV", "production").lower()

# Extra origins allowed outside development, comma separated
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "").split(",")
    if origin.strip()
]

HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "8000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
