"""
Organization service - registration, lookup and demo seeding of waste-reuse
organizations.
"""

from typing import Any, Iterable, List, Optional
import logging

from agriwaste.config.store import DocumentStore
from agriwaste.models.organization import (
    DEMO_ORGANIZATIONS,
    OrganizationCreate,
    OrganizationResponse,
)

logger = logging.getLogger(__name__)


def create_organization(store: DocumentStore, org_data: OrganizationCreate) -> OrganizationResponse:
    saved = store.insert_organization(org_data.to_document())
    organization = OrganizationResponse.from_document(saved)
    logger.info(f"Organization created: id={organization.id}, name={organization.name}, type={organization.type}")
    return organization


def find_organizations(
    store: DocumentStore,
    org_type: Optional[str] = None,
    city: Optional[str] = None,
) -> List[OrganizationResponse]:
    """
    Exact-match filter on type and city. Missing or empty filters are unconstrained.
    """
    filters = {}
    if org_type:
        filters["type"] = org_type
    if city:
        filters["city"] = city
    return [OrganizationResponse.from_document(doc) for doc in store.find_organizations(filters)]


def _distinct_strings(values: Iterable[Any]) -> List[str]:
    return [value for value in values if isinstance(value, str)]


def get_organization_types(store: DocumentStore) -> List[str]:
    return _distinct_strings(store.distinct_organization_values("type"))


def get_organization_cities(store: DocumentStore) -> List[str]:
    return _distinct_strings(store.distinct_organization_values("city"))


def seed_demo_organizations(store: DocumentStore) -> List[OrganizationResponse]:
    """
    Bulk-insert the demo organizations in a single write.
    Repeated calls insert duplicates; there is no uniqueness constraint.
    """
    saved = store.insert_organizations(org.to_document() for org in DEMO_ORGANIZATIONS)
    logger.info(f"Seeded {len(saved)} demo organizations")
    return [OrganizationResponse.from_document(doc) for doc in saved]
