# schemas/expense.py

import datetime as dt
from typing import Literal

from pydantic import Field

from laptopdesk.schemas.base import CamelModel

ExpenseCategory = Literal["Transport", "Food", "Replacement parts", "Misc"]


class ExpenseCreate(CamelModel):
    date: dt.date
    category: ExpenseCategory
    description: str
    amount: float = Field(..., ge=0)
    trip_batch: str | None = None


class Expense(ExpenseCreate):
    id: str
    created_at: dt.datetime
