"""
MongoDB document store.
Single-source-of-truth MongoDB handle for the Agri-Waste Match service.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

from pymongo import GEOSPHERE, MongoClient
from pymongo.database import Database
from pymongo.errors import ConfigurationError, PyMongoError

from agriwaste.config.store import (
    ORGANIZATIONS_COLLECTION,
    REPORTS_COLLECTION,
    Document,
    DocumentStore,
    StoreError,
)

logger = logging.getLogger(__name__)


def build_near_query(
    lng: float,
    lat: float,
    max_distance_meters: float,
    org_type: Optional[str] = None,
) -> Dict[str, Any]:
    """$near query over the 2dsphere index; results come back nearest first."""
    query: Dict[str, Any] = {
        "location": {
            "$near": {
                "$geometry": {"type": "Point", "coordinates": [lng, lat]},
                "$maxDistance": max_distance_meters,
            }
        }
    }
    if org_type:
        query["type"] = org_type
    return query


class MongoStore(DocumentStore):
    name = "mongodb"

    def __init__(
        self,
        uri: str,
        default_db_name: str = "agriwaste",
        client: Optional[MongoClient] = None,
    ):
        self.uri = uri
        self.default_db_name = default_db_name
        self._client: Optional[MongoClient] = client
        self._db: Optional[Database] = None
        self._indexes_ready = False

    @property
    def db(self) -> Database:
        if self._db is None:
            raise StoreError("MongoDB not connected. Call connect() at startup.")
        return self._db

    def connect(self) -> None:
        if self._db is None:
            try:
                if self._client is None:
                    self._client = MongoClient(self.uri, tz_aware=True)
                self._db = self._client.get_default_database(default=self.default_db_name)
            except ConfigurationError as e:
                raise StoreError(
                    f"MongoDB initialization FAILED - invalid MONGODB_URI.\n"
                    f"{str(e)}\n"
                    f"SOLUTION: check the connection string in your .env file."
                )

        if self._indexes_ready:
            return

        # The driver connects lazily; a failed ping is logged and the index is
        # created on the first nearest-organization query instead.
        try:
            self._client.admin.command("ping")
            self.ensure_indexes()
            logger.info(f"[MONGODB] Connected to database '{self._db.name}'")
        except PyMongoError as e:
            logger.error(f"[MONGODB] Connection failed: {e}")

    def ensure_indexes(self) -> None:
        self.db[ORGANIZATIONS_COLLECTION].create_index([("location", GEOSPHERE)])
        self._indexes_ready = True

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            logger.info("[MONGODB] Connection closed")
        self._client = None
        self._db = None
        self._indexes_ready = False

    def ping(self) -> bool:
        self.db.client.admin.command("ping")
        return True

    def insert_report(self, doc: Document) -> Document:
        doc = dict(doc)
        result = self.db[REPORTS_COLLECTION].insert_one(doc)
        doc["_id"] = result.inserted_id
        return doc

    def list_reports(self) -> List[Document]:
        return list(self.db[REPORTS_COLLECTION].find())

    def insert_organization(self, doc: Document) -> Document:
        doc = dict(doc)
        result = self.db[ORGANIZATIONS_COLLECTION].insert_one(doc)
        doc["_id"] = result.inserted_id
        return doc

    def insert_organizations(self, docs: Iterable[Document]) -> List[Document]:
        docs = [dict(doc) for doc in docs]
        if not docs:
            return []
        result = self.db[ORGANIZATIONS_COLLECTION].insert_many(docs)
        for doc, inserted_id in zip(docs, result.inserted_ids):
            doc["_id"] = inserted_id
        return docs

    def find_organizations(self, filters: Optional[Dict[str, str]] = None) -> List[Document]:
        query = {key: value for key, value in (filters or {}).items() if value}
        return list(self.db[ORGANIZATIONS_COLLECTION].find(query))

    def distinct_organization_values(self, field: str) -> List[Any]:
        return list(self.db[ORGANIZATIONS_COLLECTION].distinct(field))

    def nearest_organization(
        self,
        lng: float,
        lat: float,
        max_distance_meters: float,
        org_type: Optional[str] = None,
    ) -> Optional[Document]:
        if not self._indexes_ready:
            self.ensure_indexes()
        query = build_near_query(lng, lat, max_distance_meters, org_type)
        return self.db[ORGANIZATIONS_COLLECTION].find_one(query)
