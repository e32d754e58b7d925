# laptopdesk/routers/laptops.py

from fastapi import APIRouter, Depends, status

from laptopdesk.core.auth import get_current_user
from laptopdesk.database import get_store
from laptopdesk.schemas.laptop import Laptop, LaptopCreate, LaptopUpdate
from laptopdesk.services import catalog
from laptopdesk.store import RecordStore

router = APIRouter(
    prefix="/laptops",
    tags=["Laptops"],
)


@router.get("", response_model=list[Laptop])
def list_laptops(
    store: RecordStore = Depends(get_store),
    current_user=Depends(get_current_user),
):
    return catalog.list_laptops(store)


@router.post(
    "",
    response_model=Laptop,
    status_code=status.HTTP_201_CREATED,
)
def add_laptop(
    laptop_data: LaptopCreate,
    store: RecordStore = Depends(get_store),
    current_user=Depends(get_current_user),
):
    return catalog.add_laptop(store, laptop_data)


@router.patch("/{laptop_id}", response_model=Laptop)
def update_laptop_stock(
    laptop_id: str,
    laptop_data: LaptopUpdate,
    store: RecordStore = Depends(get_store),
    current_user=Depends(get_current_user),
):
    return catalog.update_laptop_stock(store, laptop_id, laptop_data)
