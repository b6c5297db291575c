from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, Numeric, Text, DateTime
from sqlalchemy.sql import func

from inventory_api.database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


# INTEGER range on MySQL and PostgreSQL
INTEGER_MIN = -2**31
INTEGER_MAX = 2**31 - 1

# Largest magnitude NUMERIC(10, 2) holds
PRICE_MAX = 99999999.99


class Product(Base):
    """
    Product model representing an item held in inventory.

    Attributes:
        id: Unique identifier generated by the store
        name: Product name
        category: Category the product is filed under
        quantity: Units in stock
        price: Unit price with two fractional digits
        description: Optional free-form description
        created_at: Timestamp when product was created
        updated_at: Timestamp when product was last updated
    """
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    category = Column(String(100), nullable=False)
    quantity = Column(Integer, nullable=False)
    price = Column(Numeric(10, 2, asdecimal=False), nullable=False)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=func.now(),
        onupdate=utcnow,
    )

    def __repr__(self):
        return f"<Product(id={self.id}, name='{self.name}', quantity={self.quantity})>"


products_table = Product.__table__
