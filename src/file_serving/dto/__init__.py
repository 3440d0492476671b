"""Data Transfer Objects for API contracts.

These Pydantic models describe the JSON endpoints. The file endpoints
return plain text and have no DTOs.
"""

from .responses import HealthCheckResponse, ServiceInfoResponse

__all__ = [
    "HealthCheckResponse",
    "ServiceInfoResponse",
]
