import threading
from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple

from allocation.domain.model import Batch, OrderLine
from allocation.interfaces.main import IRepository

Snapshot = Dict[str, Tuple[Batch, FrozenSet[OrderLine]]]


class InMemoryRepository(IRepository):
    def __init__(self, batches: Iterable[Batch] = ()):
        self._batches: Dict[str, Batch] = {}
        self.lock = threading.RLock()
        for batch in batches:
            self.add(batch)

    def add(self, batch: Batch):
        self._batches[batch.reference] = batch

    def get(self, reference: str) -> Optional[Batch]:
        return self._batches.get(reference)

    def list(self, sku: Optional[str] = None) -> List[Batch]:
        batches = list(self._batches.values())
        if sku is None:
            return batches
        return [b for b in batches if b.sku == sku]

    def delete(self, reference: str) -> int:
        if self._batches.pop(reference, None) is None:
            return 0
        return 1

    def snapshot(self) -> Snapshot:
        return {ref: (batch, batch.allocations) for ref, batch in self._batches.items()}

    def restore(self, snapshot: Snapshot):
        # batch objects are restored in place so callers keep valid references
        self._batches = {}
        for ref, (batch, allocations) in snapshot.items():
            batch.restore_allocations(allocations)
            self._batches[ref] = batch
