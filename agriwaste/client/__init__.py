"""
Client components: report form with GPS matching, and organization query.
"""

from agriwaste.client.api_client import ApiClient
from agriwaste.client.geolocation import (
    GeolocationError,
    GeolocationProvider,
    StaticGeolocationProvider,
    UnavailableGeolocationProvider,
)
from agriwaste.client.org_query import OrgQuery
from agriwaste.client.report_form import ReportForm, ReportFormFields

__all__ = [
    "ApiClient",
    "GeolocationError",
    "GeolocationProvider",
    "StaticGeolocationProvider",
    "UnavailableGeolocationProvider",
    "OrgQuery",
    "ReportForm",
    "ReportFormFields",
]
