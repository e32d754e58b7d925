# =========================================================
# SALES ROUTER
#
# POST records a sale and updates the laptop stock (and the
# commission ledger when an earner is named) in one commit.
# Sales are immutable: there is no update or delete route.
# =========================================================

from fastapi import APIRouter, Depends, status

from laptopdesk.core.auth import get_current_user
from laptopdesk.database import get_store
from laptopdesk.schemas.sale import Sale, SaleCreate
from laptopdesk.services import sales as sales_service
from laptopdesk.store import RecordStore

router = APIRouter(prefix="/sales", tags=["Sales"])


@router.post("", response_model=Sale, status_code=status.HTTP_201_CREATED)
def create_sale(
    sale_data: SaleCreate,
    store: RecordStore = Depends(get_store),
    current_user=Depends(get_current_user),
):
    return sales_service.record_sale(store, sale_data)


@router.get("", response_model=list[Sale])
def list_sales(
    store: RecordStore = Depends(get_store),
    current_user=Depends(get_current_user),
):
    return sales_service.list_sales(store)
