# tests/conftest.py

"""
Points both services at in-memory SQLite before their db modules are imported.
"""
import logging
import os

os.environ.setdefault("CATALOG_DATABASE_URL", "sqlite://")
os.environ.setdefault("TASKS_DATABASE_URL", "sqlite://")
os.environ.setdefault("DB_CONNECT_MAX_RETRIES", "1")

# Suppress noisy logs from SQLAlchemy/FastAPI during tests for cleaner output
logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
logging.getLogger("uvicorn.error").setLevel(logging.WARNING)
logging.getLogger("fastapi").setLevel(logging.WARNING)
