# schemas/sale.py

from datetime import date, datetime
from typing import Literal

from pydantic import Field

from laptopdesk.schemas.base import CamelModel

PaymentStatus = Literal["pending", "partial", "paid"]
PaymentMethod = Literal["cash", "transfer", "card"]


class SaleCreate(CamelModel):
    laptop_id: str
    client_id: str
    sale_price: float = Field(..., ge=0)
    payment_status: PaymentStatus
    payment_method: PaymentMethod
    sale_date: date
    commission_earner: str | None = None
    commission_amount: float | None = Field(None, ge=0)


class Sale(SaleCreate):
    id: str
    created_at: datetime
