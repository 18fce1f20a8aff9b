"""
Device geolocation providers for the report form.

Contract:
- current_position() returns (latitude, longitude).
- Denied or unavailable positions raise GeolocationError with a readable reason.
"""

from abc import ABC, abstractmethod
from typing import Optional, Tuple


class GeolocationError(Exception):
    pass


class GeolocationProvider(ABC):
    @abstractmethod
    def current_position(self) -> Tuple[float, float]:
        raise NotImplementedError


class StaticGeolocationProvider(GeolocationProvider):
    """Fixed position, e.g. coordinates typed in by the user or read from a GPS fix."""

    def __init__(self, latitude: float, longitude: float):
        self.latitude = latitude
        self.longitude = longitude

    def current_position(self) -> Tuple[float, float]:
        return self.latitude, self.longitude


class UnavailableGeolocationProvider(GeolocationProvider):
    """Provider that always fails, e.g. when the user denied location access."""

    def __init__(self, reason: Optional[str] = None):
        self.reason = reason or "User denied Geolocation"

    def current_position(self) -> Tuple[float, float]:
        raise GeolocationError(self.reason)
