"""Testing support – in-memory fakes.

Import in your tests::

    from datatables_query.testing import InMemoryDocumentStore
"""

from datatables_query.testing.fakes import InMemoryDocumentStore

__all__ = ["InMemoryDocumentStore"]
