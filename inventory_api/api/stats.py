from fastapi import APIRouter, Depends

from inventory_api.database import Database, get_db
from inventory_api.services.product_service import ProductService
from inventory_api.schemas.product import StatsResponse

router = APIRouter(prefix="/stats", tags=["Stats"])


@router.get(
    "",
    response_model=StatsResponse,
    summary="Inventory statistics",
    description="Product count, units in stock, distinct categories and total stock value."
)
def get_stats(db: Database = Depends(get_db)):
    service = ProductService(db)
    return service.stats()
