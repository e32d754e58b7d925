# schemas/client.py

from datetime import datetime
from typing import List

from laptopdesk.schemas.base import CamelModel


class ClientCreate(CamelModel):
    name: str
    phone: str
    email: str | None = None
    referral_source: str | None = None


class Client(ClientCreate):
    id: str
    purchase_history: List[str] = []
    support_tickets: List[str] = []
    created_at: datetime
