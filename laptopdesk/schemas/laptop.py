# schemas/laptop.py

from datetime import date, datetime
from typing import Literal

from pydantic import Field

from laptopdesk.schemas.base import CamelModel

PerformanceTier = Literal["i3", "i5", "i7"]
LaptopStatus = Literal["available", "reserved", "sold"]


class LaptopCreate(CamelModel):
    corporate_brand: str
    product_brand: str
    performance_tier: PerformanceTier
    generation: str
    sku: str
    purchase_price: float = Field(..., ge=0)
    condition_notes: str = ""
    quantity: int = Field(..., ge=0)
    purchase_date: date


class LaptopUpdate(CamelModel):
    quantity: int | None = Field(None, ge=0)
    status: LaptopStatus | None = None


class Laptop(LaptopCreate):
    id: str
    status: LaptopStatus = "available"
    created_at: datetime
