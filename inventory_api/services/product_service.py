from sqlalchemy import select, insert, update, delete, func
from typing import Any, List
import logging

from inventory_api.database import Database
from inventory_api.models.product import INTEGER_MIN, INTEGER_MAX, products_table
from inventory_api.schemas.product import ProductPayload

logger = logging.getLogger(__name__)


class ProductNotFoundError(Exception):
    """Exception raised when no product matches the requested ID."""

    def __init__(self, product_id: Any):
        super().__init__("Product not found")
        self.product_id = product_id


class ProductService:
    """
    Service class for Product CRUD operations and inventory statistics.

    Every operation maps to exactly one parameterized statement executed
    through the owned Database handle. Store failures surface as
    DatabaseError and are not caught here.
    """

    def __init__(self, db: Database):
        self.db = db

    def _require_id_in_range(self, product_id: int) -> None:
        # IDs the column cannot hold match no row
        if not INTEGER_MIN <= product_id <= INTEGER_MAX:
            raise ProductNotFoundError(product_id)

    def get_all(self) -> List[dict]:
        """
        Get all products, newest first.

        Returns:
            List of product rows ordered by created_at descending
        """
        statement = select(products_table).order_by(
            products_table.c.created_at.desc(),
            products_table.c.id.desc(),
        )
        return self.db.execute(statement).rows

    def get_by_id(self, product_id: int) -> dict:
        """
        Get a product by ID.

        Raises:
            ProductNotFoundError: If no row has this ID
        """
        self._require_id_in_range(product_id)
        statement = select(products_table).where(products_table.c.id == product_id)
        rows = self.db.execute(statement).rows
        if not rows:
            raise ProductNotFoundError(product_id)
        return rows[0]

    def create(self, product_data: ProductPayload) -> int:
        """
        Create a new product.

        Args:
            product_data: Validated product fields

        Returns:
            ID generated by the store for the new row
        """
        statement = insert(products_table).values(**product_data.model_dump())
        result = self.db.execute(statement)
        logger.info("Created product %s (%s)", result.inserted_id, product_data.name)
        return result.inserted_id

    def update(self, product_id: int, product_data: ProductPayload) -> None:
        """
        Replace the mutable fields of an existing product.

        Raises:
            ProductNotFoundError: If no row matched the ID
        """
        self._require_id_in_range(product_id)
        statement = (
            update(products_table)
            .where(products_table.c.id == product_id)
            .values(**product_data.model_dump())
        )
        result = self.db.execute(statement)
        if result.rowcount == 0:
            raise ProductNotFoundError(product_id)

    def delete(self, product_id: int) -> None:
        """
        Delete a product.

        Raises:
            ProductNotFoundError: If no row matched the ID
        """
        self._require_id_in_range(product_id)
        statement = delete(products_table).where(products_table.c.id == product_id)
        result = self.db.execute(statement)
        if result.rowcount == 0:
            raise ProductNotFoundError(product_id)
        logger.info("Deleted product %s", product_id)

    def stats(self) -> dict:
        """
        Compute aggregate inventory figures.

        An empty table yields zeros rather than NULL sums.
        """
        columns = products_table.c
        statement = select(
            func.count().label("total_products"),
            func.coalesce(func.sum(columns.quantity), 0).label("total_items"),
            func.count(func.distinct(columns.category)).label("categories"),
            func.coalesce(func.sum(columns.quantity * columns.price), 0).label("total_value"),
        ).select_from(products_table)
        row = self.db.execute(statement).rows[0]
        return {
            "total_products": int(row["total_products"]),
            "total_items": int(row["total_items"]),
            "categories": int(row["categories"]),
            "total_value": round(float(row["total_value"]), 2),
        }

    def count(self) -> int:
        statement = select(func.count().label("count")).select_from(products_table)
        return int(self.db.execute(statement).rows[0]["count"])
