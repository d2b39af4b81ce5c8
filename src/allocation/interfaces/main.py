from typing import List, Optional, Protocol

from allocation.domain import model


class IRepository(Protocol):
    """
    Interface for any batch storage
    """

    def add(self, batch: model.Batch):
        raise NotImplementedError

    def get(self, reference: str) -> Optional[model.Batch]:
        raise NotImplementedError

    def list(self, sku: Optional[str] = None) -> List[model.Batch]:
        raise NotImplementedError

    def delete(self, reference: str) -> int:
        raise NotImplementedError


class IUnitOfWork(Protocol):
    batches: IRepository

    def __enter__(self) -> "IUnitOfWork":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.rollback()

    def commit(self):
        raise NotImplementedError

    def rollback(self):
        raise NotImplementedError
