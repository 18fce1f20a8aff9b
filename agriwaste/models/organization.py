"""
Pydantic models for waste-reuse organizations and their GeoJSON locations.

Coordinates are always stored as [longitude, latitude]; the request models
accept `lat` / `lng` separately and build the point in that order.
"""

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from agriwaste.models.base import document_id


class GeoPoint(BaseModel):
    """GeoJSON point. coordinates = [lng, lat]."""
    type: Literal["Point"] = "Point"
    coordinates: List[float] = Field(..., min_length=2, max_length=2)

    @classmethod
    def from_lat_lng(cls, lat: float, lng: float) -> "GeoPoint":
        return cls(coordinates=[lng, lat])

    @property
    def lng(self) -> float:
        return self.coordinates[0]

    @property
    def lat(self) -> float:
        return self.coordinates[1]


class OrganizationCreate(BaseModel):
    """Incoming POST /api/org body. Numeric strings are accepted for lat/lng."""
    model_config = ConfigDict(
        extra="ignore",
        str_strip_whitespace=True,
        json_schema_extra={
            "example": {
                "name": "中興資源中心",
                "type": "稻草",
                "city": "南投市",
                "phone": "049-2563472",
                "address": "南投市中正路1號",
                "lat": 23.8385,
                "lng": 120.6845,
            }
        },
    )

    name: str = Field(..., min_length=1, max_length=200)
    type: str = Field(..., min_length=1, max_length=100)
    city: str = Field(..., min_length=1, max_length=100)
    phone: Optional[str] = Field(None, max_length=50)
    address: Optional[str] = Field(None, max_length=500)
    lat: float = Field(..., ge=-90, le=90, allow_inf_nan=False)
    lng: float = Field(..., ge=-180, le=180, allow_inf_nan=False)

    def to_document(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "type": self.type,
            "city": self.city,
            "phone": self.phone,
            "address": self.address,
            "location": GeoPoint.from_lat_lng(self.lat, self.lng).model_dump(),
        }


class OrganizationResponse(BaseModel):
    id: Optional[str] = Field(None, description="Store document ID")
    name: Optional[str] = None
    type: Optional[str] = None
    city: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    location: Optional[GeoPoint] = None

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "OrganizationResponse":
        return cls(
            id=document_id(doc),
            name=doc.get("name"),
            type=doc.get("type"),
            city=doc.get("city"),
            phone=doc.get("phone"),
            address=doc.get("address"),
            location=_stored_location(doc.get("location")),
        )


def _stored_location(location: Any) -> Optional[GeoPoint]:
    # Older records may carry an empty or partial point; those render as null.
    if not location:
        return None
    try:
        return GeoPoint.model_validate(location)
    except ValidationError:
        return None


class OrganizationCreated(BaseModel):
    message: str
    organization: OrganizationResponse


# Demo organizations inserted by GET /api/seed-orgs and scripts/seed_db.py
DEMO_ORGANIZATIONS = [
    OrganizationCreate(
        name="中興資源中心",
        type="稻草",
        city="南投市",
        phone="049-2563472",
        address="南投市中正路1號",
        lat=23.8385,
        lng=120.6845,
    ),
    OrganizationCreate(
        name="示範再生工坊",
        type="菇包",
        city="南投市",
        phone="049-1111222",
        address="南投市測試路22號",
        lat=23.8299,
        lng=120.6623,
    ),
]
