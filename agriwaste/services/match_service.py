"""
Match service - nearest organization for a point.

The ranking is delegated entirely to the store's spatial index
(`DocumentStore.nearest_organization`); this module only shapes the input.
"""

from typing import Optional
import logging

from agriwaste.config.store import DocumentStore
from agriwaste.core.settings import settings
from agriwaste.models.match import MatchQuery
from agriwaste.models.organization import OrganizationResponse

logger = logging.getLogger(__name__)


def find_nearest_organization(
    store: DocumentStore,
    query: MatchQuery,
    max_distance_meters: Optional[float] = None,
) -> Optional[OrganizationResponse]:
    radius = max_distance_meters if max_distance_meters is not None else settings.MATCH_MAX_DISTANCE_METERS
    doc = store.nearest_organization(
        lng=query.lng,
        lat=query.lat,
        max_distance_meters=radius,
        org_type=query.type or None,
    )
    if doc is None:
        logger.info(f"No organization within {radius:.0f}m of ({query.lat}, {query.lng}), type={query.type}")
        return None
    return OrganizationResponse.from_document(doc)
