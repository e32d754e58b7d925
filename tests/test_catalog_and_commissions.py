"""Tests for the catalog and commission services."""

from datetime import date

import pytest

from laptopdesk.core.errors import InvalidInput, NotFound
from laptopdesk.schemas.client import ClientCreate
from laptopdesk.schemas.commission import CommissionCreate, CommissionUpdate
from laptopdesk.schemas.expense import ExpenseCreate
from laptopdesk.schemas.laptop import LaptopCreate, LaptopUpdate
from laptopdesk.services import catalog, commissions
from laptopdesk.store import RecordStore


@pytest.fixture
def pending_commission(store: RecordStore):
    return commissions.create_commission(
        store,
        CommissionCreate(
            sale_id="S1",
            earner_name="Jane",
            earner_contact="0770 12 34 56",
            amount=500,
        ),
    )


def test_new_laptop_starts_available(store: RecordStore):
    laptop = catalog.add_laptop(
        store,
        LaptopCreate(
            corporate_brand="HP",
            product_brand="EliteBook 840 G5",
            performance_tier="i7",
            generation="8th",
            sku="HP-840-001",
            purchase_price=4100,
            quantity=4,
            purchase_date=date(2024, 2, 1),
        ),
    )

    assert laptop.status == "available"
    assert laptop.condition_notes == ""
    assert catalog.list_laptops(store) == [laptop]


def test_manual_stock_edit_can_reserve(store: RecordStore, make_laptop):
    make_laptop("L1", quantity=3)

    updated = catalog.update_laptop_stock(store, "L1", LaptopUpdate(status="reserved"))

    assert updated.status == "reserved"
    assert updated.quantity == 3
    assert catalog.list_laptops(store)[0].status == "reserved"


def test_manual_stock_edit_unknown_laptop(store: RecordStore):
    with pytest.raises(NotFound):
        catalog.update_laptop_stock(store, "nope", LaptopUpdate(quantity=1))


def test_clients_start_with_empty_history(store: RecordStore):
    client = catalog.add_client(store, ClientCreate(name="Samir", phone="0555 11 22 33"))

    assert client.purchase_history == []
    assert client.support_tickets == []
    assert client.email is None


def test_expenses_are_listed_in_insert_order(store: RecordStore):
    first = catalog.add_expense(
        store,
        ExpenseCreate(date=date(2024, 3, 1), category="Transport", description="Bus to Oran", amount=800),
    )
    second = catalog.add_expense(
        store,
        ExpenseCreate(
            date=date(2024, 3, 2),
            category="Replacement parts",
            description="Keyboard",
            amount=2500,
            trip_batch="Oran-03",
        ),
    )

    assert catalog.list_expenses(store) == [first, second]


def test_mark_paid_preserves_other_fields(store: RecordStore, pending_commission):
    updated = commissions.update_commission(
        store,
        pending_commission.id,
        CommissionUpdate(payment_status="paid", payout_date=date(2024, 1, 15)),
    )

    assert updated.payment_status == "paid"
    assert updated.payout_date == date(2024, 1, 15)
    assert updated.model_dump(exclude={"payment_status", "payout_date"}) == (
        pending_commission.model_dump(exclude={"payment_status", "payout_date"})
    )
    assert commissions.list_commissions(store) == [updated]


def test_partial_update_only_applies_given_fields(store: RecordStore, pending_commission):
    commissions.update_commission(
        store,
        pending_commission.id,
        CommissionUpdate(payout_date=date(2024, 2, 1)),
    )

    stored = commissions.get_commission(store, pending_commission.id)
    assert stored.payment_status == "pending"
    assert stored.payout_date == date(2024, 2, 1)


def test_update_unknown_commission_leaves_collection(store: RecordStore, pending_commission):
    before = store.load("commissions")

    with pytest.raises(NotFound):
        commissions.update_commission(store, "nope", CommissionUpdate(payment_status="paid"))

    assert store.load("commissions") == before


def test_null_status_update_is_rejected(store: RecordStore, pending_commission):
    before = store.load("commissions")

    with pytest.raises(InvalidInput):
        commissions.update_commission(
            store,
            pending_commission.id,
            CommissionUpdate.model_validate({"paymentStatus": None}),
        )

    assert store.load("commissions") == before
    assert commissions.list_commissions(store) == [pending_commission]


def test_null_payout_date_clears_it(store: RecordStore, pending_commission):
    commissions.update_commission(
        store,
        pending_commission.id,
        CommissionUpdate(payment_status="paid", payout_date=date(2024, 1, 15)),
    )

    updated = commissions.update_commission(
        store,
        pending_commission.id,
        CommissionUpdate.model_validate({"payoutDate": None}),
    )

    assert updated.payout_date is None
    assert updated.payment_status == "paid"
