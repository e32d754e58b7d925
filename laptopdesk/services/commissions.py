# laptopdesk/services/commissions.py

import logging

from pydantic import ValidationError

from laptopdesk.core.errors import InvalidInput, NotFound
from laptopdesk.schemas.base import new_id, utc_now
from laptopdesk.schemas.commission import (
    Commission,
    CommissionCreate,
    CommissionUpdate,
)
from laptopdesk.store import RecordStore
from laptopdesk.store.repositories import CommissionRepository, find_by_id

logger = logging.getLogger("laptopdesk")


def list_commissions(store: RecordStore) -> list[Commission]:
    return CommissionRepository(store).get_all()


def create_commission(store: RecordStore, commission_data: CommissionCreate) -> Commission:
    commission = Commission(
        id=new_id(),
        **commission_data.model_dump(),
        payment_status="pending",
        created_at=utc_now(),
    )

    with store.transaction(CommissionRepository.collection) as txn:
        repo = CommissionRepository(txn)
        commissions = repo.get_all()
        commissions.append(commission)
        repo.save(commissions)

    return commission


def update_commission(
    store: RecordStore,
    commission_id: str,
    update_data: CommissionUpdate,
) -> Commission:
    """
    Merge the provided fields into an existing commission.

    Only fields present in the payload are applied, so
    {"paymentStatus": "paid"} leaves payoutDate and everything else as is.
    The merged record must still be a valid commission ({"paymentStatus": null}
    is rejected), otherwise nothing is written.
    """
    changes = update_data.model_dump(exclude_unset=True)

    with store.transaction(CommissionRepository.collection) as txn:
        repo = CommissionRepository(txn)
        commissions = repo.get_all()

        for index, commission in enumerate(commissions):
            if commission.id == commission_id:
                break
        else:
            raise NotFound("Commission not found")

        try:
            updated = Commission.model_validate({**commission.model_dump(), **changes})
        except ValidationError as exc:
            raise InvalidInput("Invalid commission update") from exc

        commissions[index] = updated
        repo.save(commissions)

    logger.info(f"Commission {commission_id} updated: {changes}")

    return updated


def get_commission(store: RecordStore, commission_id: str) -> Commission:
    commission = find_by_id(list_commissions(store), commission_id)
    if commission is None:
        raise NotFound("Commission not found")
    return commission
