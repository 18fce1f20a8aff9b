"""
Report endpoints - API routes for agricultural waste report submission and retrieval.
"""

from typing import List
import logging

from fastapi import APIRouter, Depends, status

from agriwaste.config.store import DocumentStore, get_store
from agriwaste.core import messages
from agriwaste.core.errors import ApiError
from agriwaste.models.base import MessageResponse
from agriwaste.models.report import ReportCreate, ReportResponse
from agriwaste.services.report_service import create_report, get_all_reports

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Reports"])


@router.post("/report", response_model=MessageResponse)
def submit_report(report: ReportCreate, store: DocumentStore = Depends(get_store)):
    """
    Submit a new waste report.

    The report is stored with a server-assigned `time`; the response is a
    confirmation message only.
    """
    logger.info(f"📝 POST /api/report - type={report.type}, city={report.city}")
    try:
        create_report(store, report)
    except Exception as e:
        logger.error(f"❌ POST /api/report - Report write failed: {e}", exc_info=True)
        raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, messages.REPORT_WRITE_FAILED)
    return MessageResponse(message=messages.REPORT_RECEIVED)


@router.get("/reports", response_model=List[ReportResponse])
def list_reports(store: DocumentStore = Depends(get_store)):
    try:
        return get_all_reports(store)
    except Exception as e:
        logger.error(f"Failed to retrieve reports: {e}", exc_info=True)
        raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, messages.REPORT_LIST_FAILED)
