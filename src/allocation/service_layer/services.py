from datetime import date
from typing import List, Optional

from allocation.config import get_logger
from allocation.domain import model
from allocation.domain.exceptions import (
    DuplicateBatch,
    InvalidBatchReference,
    InvalidSku,
    OutOfStock,
    UnallocatedLine,
)
from allocation.interfaces.main import IUnitOfWork

logger = get_logger()


def _batch_view(batch: model.Batch) -> dict:
    return {
        "reference": batch.reference,
        "sku": batch.sku,
        "qty": batch.purchased_quantity,
        "available": batch.available_quantity,
        "eta": batch.eta.isoformat() if batch.eta else None,
    }


def add_batch(
    reference: str,
    sku: str,
    qty: int,
    eta: Optional[date],
    uow: IUnitOfWork,
) -> str:
    with uow:
        if uow.batches.get(reference=reference) is not None:
            raise DuplicateBatch(f"Batch {reference} already exists")
        uow.batches.add(model.Batch(ref=reference, sku=sku, qty=qty, eta=eta))
        uow.commit()
    logger.info(f"Added batch {reference} of {qty} x {sku}")
    return reference


def get_batch(reference: str, uow: IUnitOfWork) -> dict:
    with uow:
        batch = uow.batches.get(reference=reference)
        if batch is None:
            raise InvalidBatchReference(f"Batch {reference} not found")
        return _batch_view(batch)


def list_batches(uow: IUnitOfWork, sku: Optional[str] = None) -> List[dict]:
    with uow:
        return [_batch_view(b) for b in uow.batches.list(sku=sku)]


def allocate(order_id: str, sku: str, qty: int, uow: IUnitOfWork) -> str:
    line = model.OrderLine(order_id=order_id, sku=sku, qty=qty)
    with uow:
        batches = uow.batches.list(sku=sku)
        if not batches:
            raise InvalidSku(f"Invalid sku {sku}")
        try:
            batchref = model.allocate(line, batches)
        except OutOfStock:
            logger.warning(f"Out of stock for sku {sku}, order {order_id} needs {qty}")
            raise
        uow.commit()
    logger.info(f"Allocated order {order_id} ({qty} x {sku}) to batch {batchref}")
    return batchref


def deallocate(order_id: str, sku: str, qty: int, uow: IUnitOfWork) -> str:
    line = model.OrderLine(order_id=order_id, sku=sku, qty=qty)
    with uow:
        batches = uow.batches.list(sku=sku)
        if not batches:
            raise InvalidSku(f"Invalid sku {sku}")
        batch = next((b for b in batches if b.is_allocated(line)), None)
        if batch is None:
            logger.warning(f"Order line {order_id} is not allocated to any batch of sku {sku}")
            raise UnallocatedLine(f"Order line {order_id} is not allocated to any batch of sku {sku}")
        batch.deallocate(line)
        uow.commit()
    logger.info(f"Deallocated order {order_id} ({qty} x {sku}) from batch {batch.reference}")
    return batch.reference


def delete_batch(reference: str, uow: IUnitOfWork) -> None:
    with uow:
        if not uow.batches.delete(reference=reference):
            raise InvalidBatchReference(f"Batch {reference} not found")
        uow.commit()
    logger.info(f"Deleted batch {reference}")
