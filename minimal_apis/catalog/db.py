# minimal_apis/catalog/db.py

"""
Database configuration and session management for the catalog service.
"""
import os

from sqlalchemy.orm import declarative_base, sessionmaker

from ..common.db import create_db_engine, postgres_url

DATABASE_URL = os.getenv("CATALOG_DATABASE_URL") or postgres_url(
    os.getenv("CATALOG_POSTGRES_DB", "catalogo")
)

engine = create_db_engine(DATABASE_URL)

# autocommit=False ensures transactions must be committed explicitly.
# autoflush=False means changes aren't flushed to DB until commit or explicit flush.
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for the catalog ORM models
Base = declarative_base()


def get_db():
    """
    Dependency to provide a new database session for FastAPI endpoints.
    A session is created for each request and automatically closed after use.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
