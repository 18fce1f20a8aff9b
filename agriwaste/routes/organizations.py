"""
Organization endpoints - registration, filtered listing, distinct value lookups
and demo seeding.
"""

from typing import List, Optional
import logging

from fastapi import APIRouter, Depends, Query, status

from agriwaste.config.store import DocumentStore, get_store
from agriwaste.core import messages
from agriwaste.core.errors import ApiError
from agriwaste.models.base import MessageResponse
from agriwaste.models.organization import (
    OrganizationCreate,
    OrganizationCreated,
    OrganizationResponse,
)
from agriwaste.services import organization_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Organizations"])


@router.get("/types", response_model=List[str])
def list_types(store: DocumentStore = Depends(get_store)):
    """Distinct organization types."""
    try:
        return organization_service.get_organization_types(store)
    except Exception as e:
        logger.error(f"Type lookup failed: {e}", exc_info=True)
        raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, messages.TYPES_QUERY_FAILED)


@router.get("/cities", response_model=List[str])
def list_cities(store: DocumentStore = Depends(get_store)):
    """Distinct organization cities."""
    try:
        return organization_service.get_organization_cities(store)
    except Exception as e:
        logger.error(f"City lookup failed: {e}", exc_info=True)
        raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, messages.CITIES_QUERY_FAILED)


@router.get("/orgs", response_model=List[OrganizationResponse])
def list_organizations(
    type: Optional[str] = Query(None, description="Exact waste type (optional)"),
    city: Optional[str] = Query(None, description="Exact city (optional)"),
    store: DocumentStore = Depends(get_store),
):
    """
    List organizations filtered by type and city.
    Empty values (`?type=&city=`) behave like omitted filters.
    """
    try:
        return organization_service.find_organizations(store, org_type=type, city=city)
    except Exception as e:
        logger.error(f"Organization query failed: {e}", exc_info=True)
        raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, messages.ORG_QUERY_FAILED)


@router.post("/org", response_model=OrganizationCreated)
def create_organization(org: OrganizationCreate, store: DocumentStore = Depends(get_store)):
    """Register an organization; lat/lng are stored as a [lng, lat] GeoJSON point."""
    try:
        organization = organization_service.create_organization(store, org)
    except Exception as e:
        logger.error(f"Organization insert failed: {e}", exc_info=True)
        raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, messages.ORG_CREATE_FAILED)
    return OrganizationCreated(message=messages.ORG_CREATED, organization=organization)


@router.get("/seed-orgs", response_model=MessageResponse)
def seed_organizations(store: DocumentStore = Depends(get_store)):
    """Insert the two demo organizations. Not idempotent."""
    try:
        organization_service.seed_demo_organizations(store)
    except Exception as e:
        logger.error(f"Demo seeding failed: {e}", exc_info=True)
        raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, messages.SEED_FAILED)
    return MessageResponse(message=messages.SEED_COMPLETED)
