from dataclasses import dataclass
from datetime import date
from typing import Any, FrozenSet, Iterable, Optional, Set

from allocation.domain.exceptions import OutOfStock


@dataclass(frozen=True)
class OrderLine:
    order_id: str
    sku: str
    qty: int


class Batch:
    def __init__(self, ref: str, sku: str, qty: int, eta: Optional[date] = None):
        self.reference = ref
        self.sku = sku
        self.eta = eta
        self._purchased_quantity = qty
        self._allocations: Set[OrderLine] = set()

    def __repr__(self) -> str:
        return f"<Batch {self.reference}>"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Batch):
            return False
        return other.reference == self.reference

    def __hash__(self):
        return hash(self.reference)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Batch):
            return NotImplemented
        if self.eta is None:
            return other.eta is not None
        if other.eta is None:
            return False
        return self.eta < other.eta

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Batch):
            return NotImplemented
        return other < self

    def allocate(self, line: OrderLine):
        if self.can_allocate(line=line):
            self._allocations.add(line)

    def deallocate(self, line: OrderLine):
        self._allocations.discard(line)

    def is_allocated(self, line: OrderLine) -> bool:
        return line in self._allocations

    def restore_allocations(self, lines: Iterable[OrderLine]):
        self._allocations = set(lines)

    @property
    def allocations(self) -> FrozenSet[OrderLine]:
        return frozenset(self._allocations)

    @property
    def purchased_quantity(self) -> int:
        return self._purchased_quantity

    @property
    def allocated_quantity(self) -> int:
        return sum(line.qty for line in self._allocations)

    @property
    def available_quantity(self) -> int:
        return self._purchased_quantity - self.allocated_quantity

    def can_allocate(self, line: OrderLine) -> bool:
        return self.sku == line.sku and self.available_quantity >= line.qty


def allocate(line: OrderLine, batches: Iterable[Batch]) -> str:
    """Allocate ``line`` to the best eligible batch and return its reference.

    Batches already in stock win over shipments, and among shipments the
    earliest ETA wins. ``sorted`` is stable, so equally ranked batches keep
    the order they were passed in.
    """
    try:
        batch = next(b for b in sorted(batches) if b.can_allocate(line))
    except StopIteration:
        raise OutOfStock(f"Out of stock for sku {line.sku}") from None
    batch.allocate(line)
    return batch.reference
