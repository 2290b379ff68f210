# minimal_apis/common/db.py

"""
Engine creation and table bootstrap helpers shared by every service.
Each service keeps its own engine, session factory and declarative Base
in its own db module; this module only holds the parts that are the same.
"""
import logging
import os
import sys
import time

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

# Read DB settings from environment variables, with defaults for local/dev
POSTGRES_USER = os.getenv("POSTGRES_USER", "postgres")
POSTGRES_PASSWORD = os.getenv("POSTGRES_PASSWORD", "postgres")
POSTGRES_HOST = os.getenv("POSTGRES_HOST", "localhost")
POSTGRES_PORT = os.getenv("POSTGRES_PORT", "5432")

DB_CONNECT_MAX_RETRIES = int(os.getenv("DB_CONNECT_MAX_RETRIES", "10"))
DB_CONNECT_RETRY_DELAY = int(os.getenv("DB_CONNECT_RETRY_DELAY", "5"))


def postgres_url(database: str) -> str:
    """Compose a PostgreSQL URL for `database` from the POSTGRES_* variables."""
    return (
        "postgresql://"
        f"{POSTGRES_USER}:{POSTGRES_PASSWORD}@"
        f"{POSTGRES_HOST}:{POSTGRES_PORT}/{database}"
    )


def create_db_engine(database_url: str) -> Engine:
    """
    Create a SQLAlchemy engine for `database_url`.

    SQLite connections are shared across the threadpool FastAPI runs sync
    endpoints in, and an in-memory SQLite database lives on one connection,
    otherwise every checkout would see a fresh empty database.
    """
    if database_url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(database_url, **kwargs)

    # pool_pre_ping=True helps maintain healthy connections in a pool
    return create_engine(database_url, pool_pre_ping=True)


def init_tables(base, engine: Engine, service_name: str) -> None:
    """
    Ensure the tables of `base` exist, retrying while the database is
    unreachable. Exits the process when the database never comes up.
    """
    for i in range(DB_CONNECT_MAX_RETRIES):
        try:
            logger.info(
                f"{service_name}: connecting to the database and creating tables "
                f"(attempt {i+1}/{DB_CONNECT_MAX_RETRIES})..."
            )
            base.metadata.create_all(bind=engine)
            logger.info(f"{service_name}: database reachable, tables ensured.")
            return
        except OperationalError as e:
            logger.warning(f"{service_name}: failed to connect to the database: {e}")
            if i < DB_CONNECT_MAX_RETRIES - 1:
                logger.info(f"Retrying in {DB_CONNECT_RETRY_DELAY} seconds...")
                time.sleep(DB_CONNECT_RETRY_DELAY)
            else:
                logger.critical(
                    f"{service_name}: database unreachable after "
                    f"{DB_CONNECT_MAX_RETRIES} attempts. Exiting application."
                )
                sys.exit(1)
        except Exception as e:
            logger.critical(
                f"{service_name}: unexpected error during database startup: {e}",
                exc_info=True,
            )
            sys.exit(1)
