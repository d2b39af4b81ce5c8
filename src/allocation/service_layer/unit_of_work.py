from typing import Optional

from allocation.adapters.repository import InMemoryRepository, Snapshot
from allocation.interfaces.main import IUnitOfWork


class InMemoryUnitOfWork(IUnitOfWork):
    """Unit of work over an in-memory batch repository.

    Entering the block takes the repository lock, so two units of work sharing
    a repository never interleave. Anything not committed when the outermost
    block exits is rolled back; nested blocks join the outer one.
    """

    def __init__(self, batches: Optional[InMemoryRepository] = None):
        self.batches = batches if batches is not None else InMemoryRepository()
        self.committed = False
        self._snapshot: Optional[Snapshot] = None
        self._depth = 0

    def __enter__(self):
        self.batches.lock.acquire()
        if self._depth == 0:
            self._snapshot = self.batches.snapshot()
        self._depth += 1
        return super().__enter__()

    def __exit__(self, exc_type, exc_val, exc_tb):
        self._depth -= 1
        try:
            if self._depth == 0:
                return super().__exit__(exc_type, exc_val, exc_tb)
        finally:
            if self._depth == 0:
                self._snapshot = None
            self.batches.lock.release()

    def commit(self):
        self._snapshot = self.batches.snapshot()
        self.committed = True

    def rollback(self):
        if self._snapshot is not None:
            self.batches.restore(self._snapshot)
