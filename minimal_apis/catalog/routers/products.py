# minimal_apis/catalog/routers/products.py

"""
Product endpoints of the catalog service.
A product must reference an existing category on create and update.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ...common.crud import RecordNotFound, Repository
from ..db import get_db
from ..models import Category, Product
from ..schemas import ProductIn, ProductResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Produtos"])


def get_repository(db: Session = Depends(get_db)) -> Repository[Product]:
    return Repository(db, Product)


def _ensure_category_exists(repo: Repository[Product], category_id: int) -> None:
    if not Repository(repo.db, Category).exists(category_id):
        logger.warning(f"Category with ID: {category_id} does not exist.")
        raise HTTPException(status_code=400, detail="Category does not exist")


@router.post(
    "/produtos",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new product",
)
def create_product(
    product: ProductIn,
    response: Response,
    repo: Repository[Product] = Depends(get_repository),
):
    """
    Creates a product in an existing category.

    - Any id in the body is ignored; the database assigns it.
    - Raises 400 if `categoryId` does not reference a category.
    """
    logger.info(f"Creating product: {product.name}")
    _ensure_category_exists(repo, product.category_id)
    try:
        db_product = repo.insert(product.model_dump(exclude={"id"}))
    except SQLAlchemyError as e:
        logger.error(f"Error creating product: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Could not create product.",
        )
    response.headers["Location"] = f"/produtos/{db_product.id}"
    logger.info(f"Product '{db_product.name}' (ID: {db_product.id}) created successfully.")
    return db_product


@router.get("/produtos", response_model=List[ProductResponse], summary="List all products")
def list_products(repo: Repository[Product] = Depends(get_repository)):
    products = repo.list_all()
    logger.info(f"Retrieved {len(products)} products.")
    return products


@router.get(
    "/produtos/{product_id}",
    response_model=ProductResponse,
    summary="Retrieve a product by ID",
)
def get_product(product_id: int, repo: Repository[Product] = Depends(get_repository)):
    """
    Retrieves a single product, or 404 if it does not exist.
    """
    logger.info(f"Fetching product with ID: {product_id}")
    try:
        product = repo.find_by_id(product_id)
    except RecordNotFound:
        logger.warning(f"Product with ID: {product_id} not found.")
        raise HTTPException(status_code=404, detail="Product not found")
    logger.info(f"Product '{product.name}' (ID: {product_id}) retrieved.")
    return product


@router.put(
    "/produtos/{product_id}",
    response_model=ProductResponse,
    summary="Update an existing product",
)
def update_product(
    product_id: int,
    updated: ProductIn,
    repo: Repository[Product] = Depends(get_repository),
):
    """
    Overwrites every field of an existing product.

    - The body id must equal the path id, otherwise 400.
    - Raises 404 if the product does not exist.
    - Raises 400 if `categoryId` does not reference a category.
    """
    logger.info(f"Updating product with ID: {product_id}")
    if updated.id != product_id:
        logger.warning(f"Product update rejected: body id {updated.id} != path id {product_id}.")
        raise HTTPException(status_code=400, detail="Product id mismatch")
    if not repo.exists(product_id):
        logger.warning(f"Product with ID: {product_id} not found for update.")
        raise HTTPException(status_code=404, detail="Product not found")
    _ensure_category_exists(repo, updated.category_id)

    try:
        product = repo.update(product_id, updated.model_dump(exclude={"id"}))
    except RecordNotFound:
        logger.warning(f"Product with ID: {product_id} not found for update.")
        raise HTTPException(status_code=404, detail="Product not found")
    except SQLAlchemyError as e:
        logger.error(f"Error updating product {product_id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Could not update product.",
        )
    logger.info(f"Product '{product.name}' (ID: {product_id}) updated successfully.")
    return product


@router.delete(
    "/produtos/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a product by ID",
)
def delete_product(product_id: int, repo: Repository[Product] = Depends(get_repository)):
    logger.info(f"Attempting to delete product with ID: {product_id}")
    try:
        repo.delete(product_id)
    except RecordNotFound:
        logger.warning(f"Product with ID: {product_id} not found for deletion.")
        raise HTTPException(status_code=404, detail="Product not found")
    except SQLAlchemyError as e:
        logger.error(f"Error deleting product {product_id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while deleting the product.",
        )
    logger.info(f"Product (ID: {product_id}) deleted successfully.")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
