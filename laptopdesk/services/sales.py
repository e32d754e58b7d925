# =========================================================
# SALE TRANSACTION WORKFLOW
#
# Recording a sale touches three collections:
# - sales: the new sale is appended
# - laptops: one unit is taken out of stock, the laptop is
#   marked sold when the last unit goes
# - commissions: a pending commission is appended when the
#   sale names an earner and an amount
#
# All three are written in a single store transaction, so a
# failed sale leaves every collection unchanged.
# =========================================================

import logging

from laptopdesk.core.errors import InvalidState, NotFound
from laptopdesk.schemas.base import new_id, utc_now
from laptopdesk.schemas.commission import Commission
from laptopdesk.schemas.sale import Sale, SaleCreate
from laptopdesk.store import RecordStore
from laptopdesk.store.repositories import (
    CommissionRepository,
    LaptopRepository,
    SaleRepository,
    find_by_id,
)

logger = logging.getLogger("laptopdesk")


def record_sale(store: RecordStore, sale_data: SaleCreate) -> Sale:
    with store.transaction(
        LaptopRepository.collection,
        SaleRepository.collection,
        CommissionRepository.collection,
    ) as txn:
        laptop_repo = LaptopRepository(txn)
        sale_repo = SaleRepository(txn)

        laptops = laptop_repo.get_all()
        laptop = find_by_id(laptops, sale_data.laptop_id)

        if laptop is None:
            raise NotFound("Laptop not found")

        if laptop.status != "available" or laptop.quantity <= 0:
            raise InvalidState("Laptop not available for sale")

        sale = Sale(
            id=new_id(),
            **sale_data.model_dump(),
            created_at=utc_now(),
        )

        # Only the last unit flips the status; "reserved" is never set here
        laptop.quantity -= 1
        if laptop.quantity == 0:
            laptop.status = "sold"

        if sale_data.commission_earner and sale_data.commission_amount:
            commission_repo = CommissionRepository(txn)
            commissions = commission_repo.get_all()
            commissions.append(
                Commission(
                    id=new_id(),
                    sale_id=sale.id,
                    earner_name=sale_data.commission_earner,
                    earner_contact=sale_data.commission_earner,
                    amount=sale_data.commission_amount,
                    payment_status="pending",
                    created_at=utc_now(),
                )
            )
            commission_repo.save(commissions)

        sales = sale_repo.get_all()
        sales.append(sale)
        sale_repo.save(sales)
        laptop_repo.save(laptops)

    logger.info(
        f"Sale {sale.id} recorded: laptop {laptop.id} "
        f"({laptop.quantity} left, {laptop.status})"
    )

    return sale


def list_sales(store: RecordStore) -> list[Sale]:
    return SaleRepository(store).get_all()
