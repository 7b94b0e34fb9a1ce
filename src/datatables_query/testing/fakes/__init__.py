"""Testing fakes – in-memory test doubles."""
from datatables_query.testing.fakes.store import InMemoryDocumentStore

__all__ = ["InMemoryDocumentStore"]
