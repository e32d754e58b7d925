# schemas/commission.py

from datetime import date, datetime
from typing import Literal

from pydantic import Field

from laptopdesk.schemas.base import CamelModel

CommissionStatus = Literal["pending", "paid"]


class CommissionCreate(CamelModel):
    sale_id: str
    earner_name: str
    earner_contact: str
    amount: float = Field(..., ge=0)


class CommissionUpdate(CamelModel):
    payment_status: CommissionStatus | None = None
    payout_date: date | None = None


class Commission(CommissionCreate):
    id: str
    payment_status: CommissionStatus = "pending"
    payout_date: date | None = None
    created_at: datetime
