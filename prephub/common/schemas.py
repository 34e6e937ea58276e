from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Response base: snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


# ERROR AND STATUS SCHEMAS

class FailureResponse(BaseModel):
    """Structured failure body returned for every handled error"""
    success: bool = False
    message: str


class HealthCheckResponse(BaseModel):
    """Health check response"""
    status: str
    time_utc: datetime
    uptime_seconds: float
    version: str
    environment: str
    components: Dict[str, Any]
    counts: Optional[Dict[str, int]] = None
