"""
Persistence configuration: the document store contract and its MongoDB and
in-memory backends.
"""

from agriwaste.config.store import DocumentStore, StoreError, create_store, get_store

__all__ = [
    "DocumentStore",
    "StoreError",
    "create_store",
    "get_store",
]
