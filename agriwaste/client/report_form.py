"""
Report form - submits a waste report, then locates the user and shows the
nearest reuse organization with a navigation link.

Flow:
1. submit() posts the report.
2. On success the device position is requested.
3. With a position, the match endpoint is queried with the selected type.
4. A match carrying both `name` and `location` becomes `nearest_org`;
   anything else shows the "no nearby match" message.

Failures only change the user-facing messages; nothing is retried.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional, Tuple
import logging

import requests

from agriwaste.client.api_client import ApiClient, is_success
from agriwaste.client.geolocation import GeolocationError, GeolocationProvider
from agriwaste.core import messages
from agriwaste.models.report import WASTE_TYPES
from agriwaste.utils.geo import build_navigation_url

logger = logging.getLogger(__name__)


@dataclass
class ReportFormFields:
    type: str = ""
    city: str = ""
    quantity: str = ""
    name: str = ""
    phone: str = ""


@dataclass
class ReportForm:
    client: ApiClient
    geolocation: Optional[GeolocationProvider] = None
    fields: ReportFormFields = field(default_factory=ReportFormFields)
    response_message: str = ""
    nearest_org: Optional[Dict[str, Any]] = None
    gps_error: str = ""

    @property
    def type_options(self) -> Tuple[str, ...]:
        return WASTE_TYPES

    def update(self, **values: str) -> None:
        for name, value in values.items():
            if not hasattr(self.fields, name):
                raise AttributeError(f"Unknown report field: {name}")
            setattr(self.fields, name, value)

    def submit(self) -> None:
        try:
            resp = self.client.submit_report(asdict(self.fields))
            if not is_success(resp):
                self.response_message = messages.CLIENT_SUBMIT_FAILED
                return
            data = resp.json()
        except (requests.RequestException, ValueError) as e:
            logger.warning(f"Report submission failed: {e}")
            self.response_message = messages.CLIENT_CONNECTION_FAILED
            return

        if not isinstance(data, dict):
            logger.warning(f"Unexpected report response: {data!r}")
            self.response_message = messages.CLIENT_CONNECTION_FAILED
            return

        self.response_message = data.get("message", "")
        self._locate_and_match()

    def _locate_and_match(self) -> None:
        if self.geolocation is None:
            self.gps_error = messages.CLIENT_GPS_UNSUPPORTED
            return

        try:
            lat, lng = self.geolocation.current_position()
        except GeolocationError as e:
            self.gps_error = f"{messages.CLIENT_GPS_ERROR_PREFIX}{e}"
            self.nearest_org = None
            return

        self.gps_error = ""
        self.fetch_nearest_org(lat, lng, self.fields.type)

    def fetch_nearest_org(self, lat: float, lng: float, waste_type: str) -> None:
        try:
            resp = self.client.match(lat, lng, waste_type)
            data = resp.json()
        except (requests.RequestException, ValueError) as e:
            logger.warning(f"Match request failed: {e}")
            self.response_message = messages.CLIENT_MATCH_FAILED
            return

        if isinstance(data, dict) and data.get("location") and data.get("name"):
            self.nearest_org = data
        else:
            self.response_message = messages.CLIENT_NO_NEARBY_MATCH
            self.nearest_org = None

    @property
    def navigation_url(self) -> Optional[str]:
        if not self.nearest_org:
            return None
        return build_navigation_url(self.nearest_org.get("location"))
