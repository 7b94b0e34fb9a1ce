"""
datatables_query – DataTables server-side processing for MongoDB.

Import path convention::

    from datatables_query import DatatablesQuery
    from datatables_query.adapters.mongodb import MongoCollectionStore
    from datatables_query.kernel.errors import InvalidRequestError, StoreError
"""

from datatables_query.application.query import DatatablesQuery, PaginatedResponse

__version__ = "0.1.0"
__all__ = ["DatatablesQuery", "PaginatedResponse", "__version__"]
