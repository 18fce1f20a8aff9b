"""
HTTP client for the Agri-Waste Match API, used by the report form and the
organization query components.
"""

from typing import Any, Dict, List, Optional

import requests

from agriwaste.core.settings import settings


class ApiClient:
    """
    Thin wrapper over a `requests` session.

    - Base URL defaults to REACT_APP_API_HOST.
    - Returns `requests` responses unchanged; callers decide what a failure means.
    - Connection errors propagate as `requests.RequestException`.
    """

    def __init__(
        self,
        api_host: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        self.api_host = (api_host or settings.REACT_APP_API_HOST).rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout if timeout is not None else settings.CLIENT_TIMEOUT_SECONDS

    def _url(self, path: str) -> str:
        return f"{self.api_host}{path}"

    def submit_report(self, report: Dict[str, Any]):
        return self.session.post(self._url("/api/report"), json=report, timeout=self.timeout)

    def match(self, lat: float, lng: float, waste_type: Optional[str] = None):
        params = {"lat": lat, "lng": lng, "type": waste_type or ""}
        return self.session.get(self._url("/api/match"), params=params, timeout=self.timeout)

    def list_organizations(self, waste_type: str = "", city: str = ""):
        params = {"type": waste_type, "city": city}
        return self.session.get(self._url("/api/orgs"), params=params, timeout=self.timeout)

    def list_types(self) -> List[str]:
        resp = self.session.get(self._url("/api/types"), timeout=self.timeout)
        resp.raise_for_status()
        return resp.json()

    def list_cities(self) -> List[str]:
        resp = self.session.get(self._url("/api/cities"), timeout=self.timeout)
        resp.raise_for_status()
        return resp.json()


def is_success(resp) -> bool:
    return 200 <= resp.status_code < 300
