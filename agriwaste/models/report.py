"""
Pydantic models for agricultural waste reports.
These models handle validation for report submission and responses.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from agriwaste.models.base import document_id

# Waste categories offered by the report form
WASTE_TYPES = ("稻草", "菇包", "茶渣")


class ReportCreate(BaseModel):
    """
    Model for creating a new report (incoming POST request).
    `time` is never accepted from the client; the server assigns it.
    """
    model_config = ConfigDict(
        extra="ignore",
        str_strip_whitespace=True,
        json_schema_extra={
            "example": {
                "type": "稻草",
                "city": "南投市",
                "quantity": 120,
                "name": "王小明",
                "phone": "0912-345-678",
            }
        },
    )

    type: str = Field(..., min_length=1, max_length=100, description="Waste category")
    city: str = Field(..., min_length=1, max_length=100, description="City or district")
    quantity: float = Field(..., ge=0, description="Amount in kilograms")
    name: Optional[str] = Field(None, max_length=100, description="Contact name")
    phone: Optional[str] = Field(None, max_length=50, description="Contact phone")


class ReportResponse(BaseModel):
    id: Optional[str] = Field(None, description="Store document ID")
    type: Optional[str] = None
    city: Optional[str] = None
    quantity: Optional[float] = None
    name: Optional[str] = None
    phone: Optional[str] = None
    time: Optional[datetime] = Field(None, description="Server-assigned submission time")

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "ReportResponse":
        return cls(
            id=document_id(doc),
            type=doc.get("type"),
            city=doc.get("city"),
            quantity=doc.get("quantity"),
            name=doc.get("name"),
            phone=doc.get("phone"),
            time=doc.get("time"),
        )
