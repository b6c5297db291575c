from fastapi import APIRouter, Depends, HTTPException, status
from typing import List
import logging

from inventory_api.database import Database, get_db
from inventory_api.services.product_service import ProductService, ProductNotFoundError
from inventory_api.schemas.product import (
    ProductPayload,
    ProductResponse,
    ProductCreated,
    Message,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/products", tags=["Products"])


def _not_found(e: ProductNotFoundError) -> HTTPException:
    logger.info("Product %s not found", e.product_id)
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get(
    "",
    response_model=List[ProductResponse],
    summary="List all products",
    description="Get every product, most recently created first."
)
def list_products(db: Database = Depends(get_db)):
    """Get all products."""
    service = ProductService(db)
    return service.get_all()


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    summary="Get product by ID",
    description="Get detailed information about a specific product."
)
def get_product(
    product_id: int,
    db: Database = Depends(get_db)
):
    service = ProductService(db)

    try:
        return service.get_by_id(product_id)
    except ProductNotFoundError as e:
        raise _not_found(e)


@router.post(
    "",
    response_model=ProductCreated,
    summary="Create a new product",
    description="Create a product from name, category, quantity, price and an optional description."
)
def create_product(
    product_data: ProductPayload,
    db: Database = Depends(get_db)
):
    """
    Create a new product.

    - **name**: Product name (required)
    - **category**: Product category (required)
    - **quantity**: Units in stock (required)
    - **price**: Unit price (required)
    - **description**: Free-form description (optional)
    """
    service = ProductService(db)
    product_id = service.create(product_data)
    return ProductCreated(id=product_id, message="Product created successfully")


@router.put(
    "/{product_id}",
    response_model=Message,
    summary="Update a product",
    description="Replace all mutable fields of a product."
)
def update_product(
    product_id: int,
    product_data: ProductPayload,
    db: Database = Depends(get_db)
):
    """
    Update a product.

    The body carries the same fields as create; every field is overwritten.
    """
    service = ProductService(db)

    try:
        service.update(product_id, product_data)
    except ProductNotFoundError as e:
        raise _not_found(e)

    return Message(message="Product updated successfully")


@router.delete(
    "/{product_id}",
    response_model=Message,
    summary="Delete a product",
    description="Delete a product by ID."
)
def delete_product(
    product_id: int,
    db: Database = Depends(get_db)
):
    """Delete a product."""
    service = ProductService(db)

    try:
        service.delete(product_id)
    except ProductNotFoundError as e:
        raise _not_found(e)

    return Message(message="Product deleted successfully")
