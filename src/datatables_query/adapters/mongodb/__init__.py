"""MongoDB adapter — motor collection as a DocumentStore.

Requires the ``mongodb`` extra::

    pip install "datatables-query[mongodb]"
"""

from datatables_query.adapters.mongodb.store import MATCH_NOTHING, MongoCollectionStore, connect, create_query

__all__ = ["MATCH_NOTHING", "MongoCollectionStore", "connect", "create_query"]
