"""
Response models for the logging service.

Consistent structure for the JSON bodies the service returns; the publish
endpoint itself answers in plain text.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class ServiceResponse(BaseModel):
    """Base response model."""
    success: bool = Field(..., description="Whether the operation was successful")
    message: Optional[str] = Field(None, description="Optional message about the operation")
    timestamp: datetime = Field(default_factory=datetime.now, description="Response timestamp")


class ErrorResponse(ServiceResponse):
    """Response model for errors."""
    success: bool = Field(False, description="Always false for error responses")
    error: str = Field(..., description="Error message")
    error_code: Optional[str] = Field(None, description="Optional error code")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")


class DeliveryResponse(BaseModel):
    """Result of a message pushed to an input destination."""
    destination: str
    delivered: int


class HealthResponse(BaseModel):
    status: str
    service: str
    version: str
    binder: str
