# minimal_apis/catalog/models.py

"""
SQLAlchemy database models for the catalog service.
"""

from sqlalchemy import Column, Date, ForeignKey, Integer, Numeric, String

from .db import Base


class Category(Base):
    """
    SQLAlchemy model for the 'categorias' table.
    """

    __tablename__ = "categorias"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(80), nullable=False)
    description = Column(String(300), nullable=True)

    def __repr__(self):
        return f"<Category(id={self.id}, name='{self.name}')>"


class Product(Base):
    """
    SQLAlchemy model for the 'produtos' table.
    Each product belongs to exactly one category.
    """

    __tablename__ = "produtos"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(80), nullable=False, index=True)
    description = Column(String(300), nullable=True)

    # Numeric with 10 total digits and 2 decimal places.
    price = Column(Numeric(10, 2), nullable=False, default=0)

    image = Column(String(300), nullable=True)
    purchase_date = Column(Date, nullable=True)
    stock = Column(Integer, nullable=False, default=0)

    category_id = Column(Integer, ForeignKey("categorias.id"), nullable=False, index=True)

    def __repr__(self):
        return f"<Product(id={self.id}, name='{self.name}', stock={self.stock})>"
