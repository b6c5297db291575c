from sqlalchemy import insert
import logging

from inventory_api.database import Base, Database, DatabaseError
from inventory_api.models.product import products_table
from inventory_api.services.product_service import ProductService

logger = logging.getLogger(__name__)


SAMPLE_PRODUCTS = [
    {"name": "Laptop Pro", "category": "Electronics", "quantity": 15,
     "price": 1299.99, "description": "High-performance laptop"},
    {"name": "Wireless Mouse", "category": "Electronics", "quantity": 45,
     "price": 29.99, "description": "Ergonomic wireless mouse"},
    {"name": "Office Chair", "category": "Furniture", "quantity": 8,
     "price": 199.99, "description": "Comfortable office chair"},
    {"name": "Coffee Beans", "category": "Food", "quantity": 120,
     "price": 12.99, "description": "Premium coffee beans"},
    {"name": "Notebook Set", "category": "Office Supplies", "quantity": 200,
     "price": 8.99, "description": "Pack of 3 notebooks"},
]


def bootstrap(database: Database, seed: bool = True) -> int:
    """
    Ensure the products table exists and seed it when empty.

    Steps:
    1. Create the table if it is missing
    2. Count the existing rows
    3. Insert SAMPLE_PRODUCTS in one multi-row statement if the table is empty

    A failure in step 1 or 2 aborts the bootstrap; a failure in step 3 leaves
    the table empty. Failures are logged and never raised.

    Returns:
        Number of rows seeded
    """
    try:
        logger.info("Creating database tables...")
        database.create_all(Base.metadata)
        count = ProductService(database).count()
    except DatabaseError as e:
        logger.error("Database bootstrap failed: %s", e)
        return 0

    if count > 0 or not seed:
        logger.info("Database ready with %d existing products", count)
        return 0

    try:
        database.execute(insert(products_table).values(SAMPLE_PRODUCTS))
    except DatabaseError as e:
        logger.error("Seed insert failed: %s", e)
        return 0

    logger.info("Seeded %d sample products", len(SAMPLE_PRODUCTS))
    return len(SAMPLE_PRODUCTS)
