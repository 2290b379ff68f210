# minimal_apis/tasks/db.py

"""
Database configuration and session management for the task service.
"""
import os

from sqlalchemy.orm import declarative_base, sessionmaker

from ..common.db import create_db_engine, postgres_url

DATABASE_URL = os.getenv("TASKS_DATABASE_URL") or postgres_url(
    os.getenv("TASKS_POSTGRES_DB", "tarefas")
)

engine = create_db_engine(DATABASE_URL)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """
    Yields a session for one request and closes it when the request ends,
    whether the endpoint returned or raised.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
