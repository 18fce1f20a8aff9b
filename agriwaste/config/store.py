"""
Document store contract shared by the MongoDB and in-memory backends.

The API never talks to a driver directly: it receives a `DocumentStore`
through `create_app(store=...)` and reaches it via the `get_store` dependency.

Contract (nearest_organization):
- Input: a point (lng, lat), a radius in meters, an optional exact type filter.
- Output: the closest organization document within the radius, or None.
- Distance and tie-break belong to the backend's spatial index; callers do not
  re-rank or re-verify.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Optional

from fastapi import Request, status

from agriwaste.core import messages
from agriwaste.core.errors import ApiError

REPORTS_COLLECTION = "reports"
ORGANIZATIONS_COLLECTION = "organizations"

Document = Dict[str, Any]


class StoreError(RuntimeError):
    """Raised when the store is used before connect() or after close()."""


class DocumentStore(ABC):
    """Persistence layer for reports and organizations."""

    name: str = "abstract"

    @abstractmethod
    def connect(self) -> None:
        """Open the connection and make sure indexes exist."""

    @abstractmethod
    def close(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def ping(self) -> bool:
        raise NotImplementedError

    # Reports

    @abstractmethod
    def insert_report(self, doc: Document) -> Document:
        """Insert one report and return it with its identifier."""

    @abstractmethod
    def list_reports(self) -> List[Document]:
        raise NotImplementedError

    # Organizations

    @abstractmethod
    def insert_organization(self, doc: Document) -> Document:
        """Insert one organization and return it with its identifier."""

    @abstractmethod
    def insert_organizations(self, docs: Iterable[Document]) -> List[Document]:
        """Bulk insert in a single write. No deduplication."""

    @abstractmethod
    def find_organizations(self, filters: Optional[Dict[str, str]] = None) -> List[Document]:
        """Exact-match filter on top-level fields. Empty filters match everything."""

    @abstractmethod
    def distinct_organization_values(self, field: str) -> List[Any]:
        raise NotImplementedError

    @abstractmethod
    def nearest_organization(
        self,
        lng: float,
        lat: float,
        max_distance_meters: float,
        org_type: Optional[str] = None,
    ) -> Optional[Document]:
        raise NotImplementedError


def create_store(settings) -> DocumentStore:
    """
    Build the configured store (not yet connected).

    Rules:
    - USE_MOCK_DB=true: in-memory store.
    - Otherwise MONGODB_URI is required.
    """
    if settings.USE_MOCK_DB:
        from agriwaste.config.mock_db import MemoryStore
        return MemoryStore()

    if not settings.MONGODB_URI:
        raise StoreError(
            "MONGODB_URI is not set.\n"
            "SOLUTION: set MONGODB_URI in your environment or .env file, "
            "or set USE_MOCK_DB=true for a local in-memory store."
        )

    from agriwaste.config.mongodb import MongoStore
    return MongoStore(settings.MONGODB_URI, default_db_name=settings.MONGODB_DB_NAME)


def get_store(request: Request) -> DocumentStore:
    """FastAPI dependency returning the store attached to the running app."""
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise ApiError(status.HTTP_503_SERVICE_UNAVAILABLE, messages.DATABASE_UNAVAILABLE)
    return store
