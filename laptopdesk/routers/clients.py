# laptopdesk/routers/clients.py

from fastapi import APIRouter, Depends, status

from laptopdesk.core.auth import get_current_user
from laptopdesk.database import get_store
from laptopdesk.schemas.client import Client, ClientCreate
from laptopdesk.services import catalog
from laptopdesk.store import RecordStore

router = APIRouter(prefix="/clients", tags=["Clients"])


@router.get("", response_model=list[Client])
def list_clients(
    store: RecordStore = Depends(get_store),
    current_user=Depends(get_current_user),
):
    return catalog.list_clients(store)


@router.post("", response_model=Client, status_code=status.HTTP_201_CREATED)
def add_client(
    client_data: ClientCreate,
    store: RecordStore = Depends(get_store),
    current_user=Depends(get_current_user),
):
    return catalog.add_client(store, client_data)
