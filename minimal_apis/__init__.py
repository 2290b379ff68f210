"""
Minimal CRUD APIs: a product catalog service and a task list service,
both built on FastAPI and SQLAlchemy.
"""

__version__ = "1.0.0"
