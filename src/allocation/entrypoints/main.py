from datetime import date
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Response

from allocation.adapters.repository import InMemoryRepository
from allocation.domain.exceptions import (
    DuplicateBatch,
    InvalidBatchReference,
    InvalidSku,
    OutOfStock,
    UnallocatedLine,
)
from allocation.entrypoints.schemas import AddBatchRequest, AllocateRequest, DeallocateRequest
from allocation.interfaces.main import IUnitOfWork
from allocation.service_layer import services
from allocation.service_layer.unit_of_work import InMemoryUnitOfWork

repository = InMemoryRepository()
app = FastAPI()


def get_uow() -> IUnitOfWork:
    return InMemoryUnitOfWork(batches=repository)


@app.post("/allocate", status_code=201)
def allocate(payload: AllocateRequest, uow: IUnitOfWork = Depends(get_uow)):
    try:
        batchref = services.allocate(order_id=payload.orderid, sku=payload.sku, qty=payload.qty, uow=uow)
    except (OutOfStock, InvalidSku) as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"batchref": batchref}


@app.post("/deallocate", status_code=200)
def deallocate(payload: DeallocateRequest, uow: IUnitOfWork = Depends(get_uow)):
    try:
        batchref = services.deallocate(order_id=payload.orderid, sku=payload.sku, qty=payload.qty, uow=uow)
    except (InvalidSku, UnallocatedLine) as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"batchref": batchref}


@app.post("/batches/", status_code=201)
def add_batch(payload: AddBatchRequest, uow: IUnitOfWork = Depends(get_uow)):
    try:
        eta = None if payload.eta is None else date.fromisoformat(payload.eta)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Invalid eta {payload.eta}")
    try:
        batchref = services.add_batch(reference=payload.reference, sku=payload.sku, qty=payload.qty, eta=eta, uow=uow)
    except DuplicateBatch as e:
        raise HTTPException(status_code=409, detail=str(e))
    return {"batchref": batchref}


@app.get("/batches/")
def list_batches(sku: Optional[str] = None, uow: IUnitOfWork = Depends(get_uow)):
    return services.list_batches(uow=uow, sku=sku)


@app.get("/batches/{batchref}")
def get_batch(batchref: str, uow: IUnitOfWork = Depends(get_uow)):
    try:
        return services.get_batch(reference=batchref, uow=uow)
    except InvalidBatchReference as e:
        raise HTTPException(status_code=404, detail=str(e))


@app.delete("/batches/{batchref}", status_code=204)
def delete_batch(batchref: str, uow: IUnitOfWork = Depends(get_uow)):
    try:
        services.delete_batch(reference=batchref, uow=uow)
    except InvalidBatchReference as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=204)
