# laptopdesk/services/catalog.py
#
# Plain append-only inserts and listings for laptops, clients and expenses,
# plus the manual stock edit for laptops.

import logging

from laptopdesk.core.errors import NotFound
from laptopdesk.schemas.base import new_id, utc_now
from laptopdesk.schemas.client import Client, ClientCreate
from laptopdesk.schemas.expense import Expense, ExpenseCreate
from laptopdesk.schemas.laptop import Laptop, LaptopCreate, LaptopUpdate
from laptopdesk.store import RecordStore
from laptopdesk.store.repositories import (
    ClientRepository,
    ExpenseRepository,
    LaptopRepository,
    Repository,
)

logger = logging.getLogger("laptopdesk")


def _append(store: RecordStore, repo_class: type[Repository], record):
    with store.transaction(repo_class.collection) as txn:
        repo = repo_class(txn)
        records = repo.get_all()
        records.append(record)
        repo.save(records)

    logger.info(f"Added {repo_class.collection} record {record.id}")

    return record


# ---------------- LAPTOPS ----------------
def list_laptops(store: RecordStore) -> list[Laptop]:
    return LaptopRepository(store).get_all()


def add_laptop(store: RecordStore, laptop_data: LaptopCreate) -> Laptop:
    laptop = Laptop(
        id=new_id(),
        **laptop_data.model_dump(),
        status="available",
        created_at=utc_now(),
    )
    return _append(store, LaptopRepository, laptop)


def update_laptop_stock(
    store: RecordStore,
    laptop_id: str,
    laptop_data: LaptopUpdate,
) -> Laptop:
    changes = laptop_data.model_dump(exclude_unset=True, exclude_none=True)

    with store.transaction(LaptopRepository.collection) as txn:
        repo = LaptopRepository(txn)
        laptops = repo.get_all()

        for index, laptop in enumerate(laptops):
            if laptop.id == laptop_id:
                break
        else:
            raise NotFound("Laptop not found")

        updated = laptop.model_copy(update=changes)
        laptops[index] = updated
        repo.save(laptops)

    logger.info(f"Laptop {laptop_id} stock edited: {changes}")

    return updated


# ---------------- CLIENTS ----------------
def list_clients(store: RecordStore) -> list[Client]:
    return ClientRepository(store).get_all()


def add_client(store: RecordStore, client_data: ClientCreate) -> Client:
    client = Client(
        id=new_id(),
        **client_data.model_dump(),
        purchase_history=[],
        support_tickets=[],
        created_at=utc_now(),
    )
    return _append(store, ClientRepository, client)


# ---------------- EXPENSES ----------------
def list_expenses(store: RecordStore) -> list[Expense]:
    return ExpenseRepository(store).get_all()


def add_expense(store: RecordStore, expense_data: ExpenseCreate) -> Expense:
    expense = Expense(
        id=new_id(),
        **expense_data.model_dump(),
        created_at=utc_now(),
    )
    return _append(store, ExpenseRepository, expense)
