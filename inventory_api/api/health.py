from fastapi import APIRouter, Depends

from inventory_api.database import Database, DatabaseError, get_db

router = APIRouter(prefix="/health", tags=["Health"])


@router.get(
    "",
    summary="Health check",
    description="Basic health check endpoint."
)
def health_check():
    """Simple health check."""
    return {"status": "healthy"}


@router.get(
    "/ready",
    summary="Readiness check",
    description="Check if the database is reachable."
)
def readiness_check(db: Database = Depends(get_db)):
    """
    Readiness check for the database connection.

    Reports "not_ready" with the driver message instead of failing.
    """
    checks = {"database": False}

    try:
        checks["database"] = db.ping()
    except DatabaseError as e:
        checks["database_error"] = str(e)

    return {
        "status": "ready" if checks["database"] else "not_ready",
        "checks": checks
    }
