"""
Validated query for GET /api/match.
"""

from typing import Optional

from pydantic import BaseModel, Field


class MatchQuery(BaseModel):
    lat: float = Field(..., ge=-90, le=90, allow_inf_nan=False)
    lng: float = Field(..., ge=-180, le=180, allow_inf_nan=False)
    type: Optional[str] = Field(None, description="Exact waste type filter (optional)")
