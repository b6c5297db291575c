from dataclasses import dataclass, field
from typing import Any, Optional
import logging

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import InvalidRequestError, SQLAlchemyError
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

# Base class for models
Base = declarative_base()


class DatabaseError(Exception):
    """Exception raised when the database or its driver reports a failure."""
    pass


@dataclass
class StatementResult:
    """
    Outcome of a single executed statement.

    Attributes:
        rows: Returned rows as dictionaries (empty for writes)
        rowcount: Number of rows affected by a write
        inserted_id: Primary key generated by a single-row insert
    """
    rows: list[dict[str, Any]] = field(default_factory=list)
    rowcount: int = 0
    inserted_id: Optional[int] = None


def _driver_message(error: SQLAlchemyError) -> str:
    # DBAPIError wraps the driver exception in .orig
    return str(getattr(error, "orig", None) or error)


def engine_options(url: str) -> dict[str, Any]:
    """Build engine keyword arguments suited to the database backend."""
    parsed = make_url(url)
    if parsed.get_backend_name() == "sqlite":
        options: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
        if parsed.database in (None, "", ":memory:"):
            # In-memory databases live only as long as their connection
            options["poolclass"] = StaticPool
        return options
    return {"pool_pre_ping": True}


class Database:
    """
    Owned handle on the relational store.

    Lifecycle is open -> execute (any number of times) -> close. Every
    statement runs in its own autocommitted connection checkout, so writes
    are visible to the next statement immediately.
    """

    def __init__(self, url: str, **options: Any):
        self.url = url
        self.options = options or engine_options(url)
        self.engine: Optional[Engine] = None

    @property
    def is_open(self) -> bool:
        return self.engine is not None

    def open(self) -> "Database":
        if self.engine is None:
            self.engine = create_engine(self.url, **self.options)
            logger.info("Opened database engine for %s", make_url(self.url).render_as_string(hide_password=True))
        return self

    def close(self) -> None:
        if self.engine is not None:
            self.engine.dispose()
            self.engine = None
            logger.info("Closed database engine")

    def execute(self, statement, parameters=None) -> StatementResult:
        """
        Execute a single parameterized statement.

        Args:
            statement: SQLAlchemy Core construct or raw SQL string
            parameters: Bound parameters (dict, or list of dicts for executemany)

        Returns:
            StatementResult with rows, affected count and generated id

        Raises:
            DatabaseError: On any connectivity, constraint or driver failure
        """
        if self.engine is None:
            raise DatabaseError("Database connection is not open")

        if isinstance(statement, str):
            statement = text(statement)

        try:
            with self.engine.begin() as conn:
                if parameters is None:
                    result = conn.execute(statement)
                else:
                    result = conn.execute(statement, parameters)

                if result.returns_rows:
                    return StatementResult(rows=[dict(row) for row in result.mappings()])

                inserted_id = None
                if result.is_insert:
                    try:
                        primary_key = result.inserted_primary_key
                    except InvalidRequestError:
                        # Multi-row inserts have no single generated key
                        primary_key = None
                    if primary_key:
                        inserted_id = primary_key[0]

                return StatementResult(rowcount=result.rowcount, inserted_id=inserted_id)
        except SQLAlchemyError as e:
            raise DatabaseError(_driver_message(e)) from e
        except (OverflowError, ValueError) as e:
            # sqlite3 raises these unwrapped for parameters it cannot bind
            raise DatabaseError(str(e)) from e

    def create_all(self, metadata) -> None:
        """Create the tables described by metadata, skipping existing ones."""
        if self.engine is None:
            raise DatabaseError("Database connection is not open")
        try:
            metadata.create_all(bind=self.engine, checkfirst=True)
        except SQLAlchemyError as e:
            raise DatabaseError(_driver_message(e)) from e

    def ping(self) -> bool:
        """Run a trivial query; raises DatabaseError if the store is unreachable."""
        self.execute("SELECT 1")
        return True


def get_db(request: Request) -> Database:
    """
    Dependency to get the application's database handle.
    The handle is opened and closed by the application lifespan.
    """
    return request.app.state.database
