# laptopdesk/store/repositories.py
#
# Typed accessors over the record store. A repository works on anything with
# the store's load/save contract, so the same classes are used directly
# against the store or inside a transaction.

import logging
from typing import Generic, Protocol, TypeVar

from pydantic import BaseModel, ValidationError

from laptopdesk.core.errors import StorageFailure
from laptopdesk.schemas.client import Client
from laptopdesk.schemas.commission import Commission
from laptopdesk.schemas.expense import Expense
from laptopdesk.schemas.laptop import Laptop
from laptopdesk.schemas.sale import Sale
from laptopdesk.schemas.user import User

logger = logging.getLogger("laptopdesk")

ModelT = TypeVar("ModelT", bound=BaseModel)


class RecordSource(Protocol):
    def load(self, collection: str) -> list[dict]: ...

    def save(self, collection: str, records: list[dict]) -> None: ...


class Repository(Generic[ModelT]):
    collection: str
    model: type[ModelT]

    def __init__(self, source: RecordSource):
        self.source = source

    def get_all(self) -> list[ModelT]:
        records = self.source.load(self.collection)

        try:
            return [self.model.model_validate(record) for record in records]
        except ValidationError as exc:
            logger.error(f"Invalid record in '{self.collection}': {exc}")
            raise StorageFailure(f"Unable to read {self.collection}") from exc

    def save(self, records: list[ModelT]) -> None:
        self.source.save(
            self.collection,
            [
                record.model_dump(mode="json", by_alias=True)
                for record in records
            ],
        )


class UserRepository(Repository[User]):
    collection = "users"
    model = User


class LaptopRepository(Repository[Laptop]):
    collection = "laptops"
    model = Laptop


class ClientRepository(Repository[Client]):
    collection = "clients"
    model = Client


class ExpenseRepository(Repository[Expense]):
    collection = "expenses"
    model = Expense


class SaleRepository(Repository[Sale]):
    collection = "sales"
    model = Sale


class CommissionRepository(Repository[Commission]):
    collection = "commissions"
    model = Commission


def find_by_id(records, record_id: str):
    return next((record for record in records if record.id == record_id), None)
