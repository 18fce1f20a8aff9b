"""
Report service - business logic for agricultural waste reports.
Each call performs exactly one store operation.
"""

from datetime import datetime, timezone
from typing import List
import logging

from agriwaste.config.store import DocumentStore
from agriwaste.models.report import ReportCreate, ReportResponse

logger = logging.getLogger(__name__)


def create_report(store: DocumentStore, report_data: ReportCreate) -> ReportResponse:
    """
    Store a new report. `time` is assigned here, never taken from the client.
    """
    report_dict = report_data.model_dump()
    report_dict["time"] = datetime.now(timezone.utc)

    saved = store.insert_report(report_dict)
    report = ReportResponse.from_document(saved)
    logger.info(f"Report received: id={report.id}, type={report.type}, city={report.city}, quantity={report.quantity}")
    return report


def get_all_reports(store: DocumentStore) -> List[ReportResponse]:
    return [ReportResponse.from_document(doc) for doc in store.list_reports()]
