# laptopdesk/routers/commissions.py

from fastapi import APIRouter, Depends, status

from laptopdesk.core.auth import get_current_user
from laptopdesk.database import get_store
from laptopdesk.schemas.commission import (
    Commission,
    CommissionCreate,
    CommissionUpdate,
)
from laptopdesk.services import commissions as commission_service
from laptopdesk.store import RecordStore

router = APIRouter(prefix="/commissions", tags=["Commissions"])


@router.get("", response_model=list[Commission])
def list_commissions(
    store: RecordStore = Depends(get_store),
    current_user=Depends(get_current_user),
):
    return commission_service.list_commissions(store)


@router.post("", response_model=Commission, status_code=status.HTTP_201_CREATED)
def create_commission(
    commission_data: CommissionCreate,
    store: RecordStore = Depends(get_store),
    current_user=Depends(get_current_user),
):
    return commission_service.create_commission(store, commission_data)


@router.get("/{commission_id}", response_model=Commission)
def get_commission(
    commission_id: str,
    store: RecordStore = Depends(get_store),
    current_user=Depends(get_current_user),
):
    return commission_service.get_commission(store, commission_id)


# Used by the "mark as paid" action: {"paymentStatus": "paid", "payoutDate": "..."}
@router.patch("/{commission_id}", response_model=Commission)
def update_commission(
    commission_id: str,
    update_data: CommissionUpdate,
    store: RecordStore = Depends(get_store),
    current_user=Depends(get_current_user),
):
    return commission_service.update_commission(store, commission_id, update_data)
