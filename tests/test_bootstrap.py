"""Tests for schema creation and sample data seeding."""
from unittest.mock import patch

from sqlalchemy import select

from inventory_api.database import Database, DatabaseError
from inventory_api.models.product import products_table
from inventory_api.services.bootstrap import bootstrap, SAMPLE_PRODUCTS
from inventory_api.services.product_service import ProductService


def test_bootstrap_creates_table_and_seeds():
    """Test an empty database gets the table and five sample rows."""
    db = Database("sqlite:///:memory:").open()

    seeded = bootstrap(db)

    assert seeded == 5
    names = {row["name"] for row in db.execute(select(products_table.c.name)).rows}
    assert names == {p["name"] for p in SAMPLE_PRODUCTS}
    db.close()


def test_bootstrap_is_idempotent():
    """Test running bootstrap twice does not duplicate the seed rows."""
    db = Database("sqlite:///:memory:").open()

    bootstrap(db)
    assert bootstrap(db) == 0
    assert ProductService(db).count() == 5
    db.close()


def test_bootstrap_skips_seed_when_disabled():
    """Test seeding can be switched off."""
    db = Database("sqlite:///:memory:").open()

    assert bootstrap(db, seed=False) == 0
    assert ProductService(db).count() == 0
    db.close()


def test_bootstrap_seed_failure_leaves_empty_table():
    """Test a failing seed insert is logged and ignored."""
    db = Database("sqlite:///:memory:").open()
    real_execute = db.execute

    def failing_insert(statement, parameters=None):
        if getattr(statement, "is_insert", False):
            raise DatabaseError("seed failed")
        return real_execute(statement, parameters)

    with patch.object(db, "execute", side_effect=failing_insert):
        assert bootstrap(db) == 0

    assert ProductService(db).count() == 0
    db.close()


def test_bootstrap_schema_failure_is_not_raised():
    """Test a failure creating the table aborts bootstrap without raising."""
    db = Database("sqlite:///:memory:")

    # Never opened, so every step fails
    assert bootstrap(db) == 0


def test_seeded_rows_have_timestamps():
    """Test seed rows get created_at and updated_at set."""
    db = Database("sqlite:///:memory:").open()
    bootstrap(db)

    for row in ProductService(db).get_all():
        assert row["created_at"] is not None
        assert row["updated_at"] is not None
    db.close()
