"""
In-memory document store for local development and tests (USE_MOCK_DB=true).

Mirrors the MongoDB backend: documents get a generated `_id`, filters are exact
matches on top-level fields, and the nearest lookup ranks points by great-circle
distance with insertion order breaking ties.
"""

import copy
import logging
import threading
from typing import Any, Dict, Iterable, List, Optional

from bson import ObjectId

from agriwaste.config.store import Document, DocumentStore, StoreError
from agriwaste.utils.geo import haversine_meters

logger = logging.getLogger(__name__)


class MemoryStore(DocumentStore):
    name = "memory"

    def __init__(self):
        self._lock = threading.Lock()
        self._reports: List[Document] = []
        self._organizations: List[Document] = []
        self._connected = False

    def connect(self) -> None:
        self._connected = True
        logger.info("[MOCK DB] USING IN-MEMORY DATABASE")

    def close(self) -> None:
        self._connected = False

    def ping(self) -> bool:
        if not self._connected:
            raise StoreError("In-memory store is not connected")
        return True

    def _insert(self, collection: List[Document], doc: Document) -> Document:
        stored = copy.deepcopy(doc)
        stored.setdefault("_id", ObjectId())
        collection.append(stored)
        return copy.deepcopy(stored)

    def insert_report(self, doc: Document) -> Document:
        with self._lock:
            return self._insert(self._reports, doc)

    def list_reports(self) -> List[Document]:
        with self._lock:
            return copy.deepcopy(self._reports)

    def insert_organization(self, doc: Document) -> Document:
        with self._lock:
            return self._insert(self._organizations, doc)

    def insert_organizations(self, docs: Iterable[Document]) -> List[Document]:
        with self._lock:
            return [self._insert(self._organizations, doc) for doc in docs]

    def find_organizations(self, filters: Optional[Dict[str, str]] = None) -> List[Document]:
        active = {key: value for key, value in (filters or {}).items() if value}
        with self._lock:
            return [
                copy.deepcopy(doc)
                for doc in self._organizations
                if all(doc.get(key) == value for key, value in active.items())
            ]

    def distinct_organization_values(self, field: str) -> List[Any]:
        values: List[Any] = []
        with self._lock:
            for doc in self._organizations:
                if field not in doc:
                    continue
                value = doc[field]
                if value not in values:
                    values.append(value)
        return values

    def nearest_organization(
        self,
        lng: float,
        lat: float,
        max_distance_meters: float,
        org_type: Optional[str] = None,
    ) -> Optional[Document]:
        best: Optional[Document] = None
        best_distance: Optional[float] = None
        with self._lock:
            for doc in self._organizations:
                if org_type and doc.get("type") != org_type:
                    continue
                coordinates = (doc.get("location") or {}).get("coordinates")
                if not coordinates or len(coordinates) < 2:
                    continue
                distance = haversine_meters(lat, lng, coordinates[1], coordinates[0])
                if distance > max_distance_meters:
                    continue
                if best_distance is None or distance < best_distance:
                    best, best_distance = doc, distance
            return copy.deepcopy(best) if best is not None else None
