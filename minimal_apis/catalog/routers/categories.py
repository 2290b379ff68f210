# minimal_apis/catalog/routers/categories.py

"""
Category endpoints of the catalog service.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ...common.crud import RecordNotFound, Repository
from ..auth import require_token
from ..db import get_db
from ..models import Category, Product
from ..schemas import CategoryIn, CategoryResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Categorias"])


def get_repository(db: Session = Depends(get_db)) -> Repository[Category]:
    return Repository(db, Category)


@router.post(
    "/categorias",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new category",
)
def create_category(
    category: CategoryIn,
    response: Response,
    repo: Repository[Category] = Depends(get_repository),
):
    """
    Creates a category. Any id in the body is ignored; the database assigns it.
    The `Location` header points at the new category.
    """
    logger.info(f"Creating category: {category.name}")
    try:
        db_category = repo.insert(category.model_dump(exclude={"id"}))
    except SQLAlchemyError as e:
        logger.error(f"Error creating category: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Could not create category.",
        )
    response.headers["Location"] = f"/categorias/{db_category.id}"
    logger.info(f"Category '{db_category.name}' (ID: {db_category.id}) created successfully.")
    return db_category


@router.get(
    "/categorias",
    response_model=List[CategoryResponse],
    summary="List all categories",
    dependencies=[Depends(require_token)],
)
def list_categories(repo: Repository[Category] = Depends(get_repository)):
    """
    Lists every category. Requires a bearer token issued by `POST /login`.
    """
    categories = repo.list_all()
    logger.info(f"Retrieved {len(categories)} categories.")
    return categories


@router.get(
    "/categorias/{category_id}",
    response_model=CategoryResponse,
    summary="Retrieve a category by ID",
)
def get_category(category_id: int, repo: Repository[Category] = Depends(get_repository)):
    logger.info(f"Fetching category with ID: {category_id}")
    try:
        return repo.find_by_id(category_id)
    except RecordNotFound:
        logger.warning(f"Category with ID: {category_id} not found.")
        raise HTTPException(status_code=404, detail="Category not found")


@router.put(
    "/categoria/{category_id}",
    response_model=CategoryResponse,
    summary="Update an existing category",
)
@router.put(
    "/categorias/{category_id}",
    response_model=CategoryResponse,
    include_in_schema=False,
)
def update_category(
    category_id: int,
    updated: CategoryIn,
    repo: Repository[Category] = Depends(get_repository),
):
    """
    Overwrites the name and description of a category.

    - The body id must equal the path id, otherwise 400.
    - Raises 404 if the category does not exist.
    """
    logger.info(f"Updating category with ID: {category_id}")
    if updated.id != category_id:
        logger.warning(f"Category update rejected: body id {updated.id} != path id {category_id}.")
        raise HTTPException(status_code=400, detail="Category id mismatch")
    try:
        category = repo.update(category_id, updated.model_dump(exclude={"id"}))
    except RecordNotFound:
        logger.warning(f"Category with ID: {category_id} not found for update.")
        raise HTTPException(status_code=404, detail="Category not found")
    except SQLAlchemyError as e:
        logger.error(f"Error updating category {category_id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Could not update category.",
        )
    logger.info(f"Category '{category.name}' (ID: {category_id}) updated successfully.")
    return category


@router.delete(
    "/categorias/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a category by ID",
)
def delete_category(category_id: int, repo: Repository[Category] = Depends(get_repository)):
    """
    Deletes a category.

    - Raises 404 if the category does not exist.
    - Raises 409 while products still reference the category.
    """
    logger.info(f"Attempting to delete category with ID: {category_id}")
    if not repo.exists(category_id):
        logger.warning(f"Category with ID: {category_id} not found for deletion.")
        raise HTTPException(status_code=404, detail="Category not found")

    in_use = repo.db.scalars(
        select(Product.id).where(Product.category_id == category_id).limit(1)
    ).first()
    if in_use is not None:
        logger.warning(f"Category with ID: {category_id} still has products; not deleted.")
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Category still has products",
        )

    try:
        repo.delete(category_id)
    except SQLAlchemyError as e:
        logger.error(f"Error deleting category {category_id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while deleting the category.",
        )
    logger.info(f"Category (ID: {category_id}) deleted successfully.")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
