import pytest

from allocation.adapters.repository import InMemoryRepository
from allocation.domain.model import Batch, OrderLine


@pytest.mark.unit
@pytest.mark.repository
def test_repository_can_save_and_retrieve_a_batch():
    batch = Batch("batch1", "RUSTY-SOAPDISH", 100, eta=None)
    repo = InMemoryRepository()
    repo.add(batch)

    assert repo.get("batch1") is batch
    assert repo.get("batch2") is None


@pytest.mark.unit
@pytest.mark.repository
def test_repository_lists_batches_in_insertion_order():
    batches = [
        Batch("batch1", "ROUND-MIRROR", 100, eta=None),
        Batch("batch2", "PRETTY-TABLE", 100, eta=None),
        Batch("batch3", "ROUND-MIRROR", 100, eta=None),
    ]
    repo = InMemoryRepository(batches)

    assert repo.list() == batches
    assert repo.list(sku="ROUND-MIRROR") == [batches[0], batches[2]]
    assert repo.list(sku="UNKNOWN") == []


@pytest.mark.unit
@pytest.mark.repository
def test_repository_delete_reports_whether_a_batch_was_removed():
    repo = InMemoryRepository([Batch("batch1", "LITTLE-BOX", 100, eta=None)])

    assert repo.delete("batch1") == 1
    assert repo.delete("batch1") == 0
    assert repo.list() == []


@pytest.mark.unit
@pytest.mark.repository
def test_restore_rewinds_allocations_in_place():
    batch = Batch("batch1", "GENERIC-SOFA", 100, eta=None)
    repo = InMemoryRepository([batch])
    snapshot = repo.snapshot()

    batch.allocate(OrderLine(order_id="order1", sku="GENERIC-SOFA", qty=12))
    repo.add(Batch("batch2", "GENERIC-SOFA", 10, eta=None))
    repo.restore(snapshot)

    assert repo.list() == [batch]
    assert repo.get("batch1") is batch
    assert batch.available_quantity == 100
