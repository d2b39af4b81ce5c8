from datetime import date
from typing import Callable, Generator, Optional, Tuple

import pytest
from fastapi.testclient import TestClient

from allocation.adapters.repository import InMemoryRepository
from allocation.domain.model import Batch, OrderLine
from allocation.entrypoints.main import app, get_uow
from allocation.service_layer.unit_of_work import InMemoryUnitOfWork


@pytest.fixture(scope="function")
def make_batch_and_line() -> Callable[..., Tuple[Batch, OrderLine]]:
    def _make(
        batch_sku: str,
        batch_qty: int,
        line_sku: str,
        line_qty: int,
        batch_ref="batch-001",
        batch_eta: Optional[date] = date.today(),
        order_id="order-123",
    ) -> Tuple[Batch, OrderLine]:
        batch = Batch(ref=batch_ref, sku=batch_sku, qty=batch_qty, eta=batch_eta)
        line = OrderLine(order_id=order_id, sku=line_sku, qty=line_qty)
        return batch, line

    return _make


@pytest.fixture(scope="function")
def uow() -> InMemoryUnitOfWork:
    return InMemoryUnitOfWork(batches=InMemoryRepository())


@pytest.fixture(scope="function")
def fastapi_test_client() -> Generator[TestClient, None, None]:
    repository = InMemoryRepository()
    app.dependency_overrides[get_uow] = lambda: InMemoryUnitOfWork(batches=repository)
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()
