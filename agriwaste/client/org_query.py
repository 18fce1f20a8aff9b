"""
Organization query - lists organizations by free-text type and city filters.
Any failure yields an empty result set.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List
import logging

import requests

from agriwaste.client.api_client import ApiClient, is_success

logger = logging.getLogger(__name__)


@dataclass
class OrgQuery:
    client: ApiClient
    type: str = ""
    city: str = ""
    results: List[Dict[str, Any]] = field(default_factory=list)

    def run(self) -> List[Dict[str, Any]]:
        try:
            resp = self.client.list_organizations(self.type, self.city)
            data = resp.json() if is_success(resp) else []
        except (requests.RequestException, ValueError) as e:
            logger.warning(f"Organization query failed: {e}")
            data = []

        self.results = data if isinstance(data, list) else []
        return self.results
