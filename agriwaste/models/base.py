"""
Pydantic base models shared by the API routes.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Plain `{message}` body used for confirmations and sentinels."""
    message: str


def document_id(doc: Dict[str, Any]) -> Optional[str]:
    """Render a stored document's identifier (`_id` or `id`) as a string."""
    raw = doc.get("_id", doc.get("id"))
    return str(raw) if raw is not None else None
