"""
Match route - nearest organization to the caller's GPS position.
"""

from typing import Optional, Union
import logging

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.encoders import jsonable_encoder
from pydantic import ValidationError

from agriwaste.config.store import DocumentStore, get_store
from agriwaste.core import messages
from agriwaste.core.errors import ApiError
from agriwaste.models.base import MessageResponse
from agriwaste.models.match import MatchQuery
from agriwaste.models.organization import OrganizationResponse
from agriwaste.services.match_service import find_nearest_organization

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Match"])


@router.get("/match", response_model=None)
def match_organization(
    request: Request,
    lat: Optional[str] = Query(None, description="Latitude of the caller"),
    lng: Optional[str] = Query(None, description="Longitude of the caller"),
    type: Optional[str] = Query(None, description="Waste type (optional)"),
    store: DocumentStore = Depends(get_store),
) -> Union[OrganizationResponse, MessageResponse]:
    """
    Find the single closest organization within the configured radius
    (default 30 km), optionally restricted to one waste type.

    - 400 when lat/lng are missing, malformed or out of range (no query runs)
    - `{message}` sentinel when nothing is close enough
    """
    if not lat or not lng:
        raise ApiError(status.HTTP_400_BAD_REQUEST, messages.MISSING_COORDINATES)

    try:
        query = MatchQuery(lat=lat, lng=lng, type=type or None)
    except ValidationError as e:
        errors = jsonable_encoder(e.errors(include_url=False), custom_encoder={Exception: str})
        raise ApiError(status.HTTP_400_BAD_REQUEST, messages.INVALID_REQUEST, errors=errors)

    max_distance = request.app.state.settings.MATCH_MAX_DISTANCE_METERS
    try:
        match = find_nearest_organization(store, query, max_distance_meters=max_distance)
    except Exception as e:
        logger.error(f"Match query failed: {e}", exc_info=True)
        raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, messages.MATCH_FAILED)

    if match is None:
        return MessageResponse(message=messages.NO_NEARBY_MATCH)
    return match
