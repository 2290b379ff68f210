# minimal_apis/catalog/schemas.py

"""
Pydantic schemas for the catalog service API.
JSON bodies use camelCase keys; snake_case keys are accepted on input too.
"""

from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# Body of POST /categorias and PUT /categoria/{id}.
# The id is ignored on create and must match the path on update.
class CategoryIn(CamelModel):
    id: Optional[int] = Field(None, description="Identifier; must match the path id on update.")
    name: str = Field(..., min_length=1, max_length=80, description="Name of the category.")
    description: Optional[str] = Field(None, max_length=300, description="Description of the category.")


class CategoryResponse(CamelModel):
    id: int
    name: str
    description: Optional[str] = None


# Body of POST /produtos and PUT /produtos/{id}.
class ProductIn(CamelModel):
    id: Optional[int] = Field(None, description="Identifier; must match the path id on update.")
    name: str = Field(..., min_length=1, max_length=80, description="Name of the product.")
    description: Optional[str] = Field(None, max_length=300, description="Description of the product.")
    price: Decimal = Field(
        ..., ge=0, max_digits=10, decimal_places=2,
        description="Price of the product. Non-negative, at most 10 digits with 2 decimals.",
    )
    image: Optional[str] = Field(None, max_length=300, description="Image URI or path.")
    purchase_date: Optional[date] = Field(None, description="Date the product was purchased.")
    stock: int = Field(0, ge=0, description="Units in stock. Must be non-negative.")
    category_id: int = Field(..., description="Identifier of the product's category.")


class ProductResponse(CamelModel):
    id: int
    name: str
    description: Optional[str] = None
    price: float
    image: Optional[str] = None
    purchase_date: Optional[date] = None
    stock: int
    category_id: int


class UserLogin(BaseModel):
    username: str = Field(..., alias="userName")
    password: str

    model_config = ConfigDict(populate_by_name=True)


class TokenResponse(BaseModel):
    token: str
