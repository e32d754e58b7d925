# laptopdesk/routers/expenses.py

from fastapi import APIRouter, Depends, status

from laptopdesk.core.auth import get_current_user
from laptopdesk.database import get_store
from laptopdesk.schemas.expense import Expense, ExpenseCreate
from laptopdesk.services import catalog
from laptopdesk.store import RecordStore

router = APIRouter(prefix="/expenses", tags=["Expenses"])


@router.get("", response_model=list[Expense])
def list_expenses(
    store: RecordStore = Depends(get_store),
    current_user=Depends(get_current_user),
):
    return catalog.list_expenses(store)


@router.post("", response_model=Expense, status_code=status.HTTP_201_CREATED)
def add_expense(
    expense_data: ExpenseCreate,
    store: RecordStore = Depends(get_store),
    current_user=Depends(get_current_user),
):
    return catalog.add_expense(store, expense_data)
