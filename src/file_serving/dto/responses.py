"""Response DTOs for API endpoints."""

from pydantic import BaseModel, Field


class ServiceInfoResponse(BaseModel):
    """Response DTO for the root endpoint."""

    name: str = Field(..., description="Service name")
    version: str = Field(..., description="Service version")
    description: str = Field(..., description="What the service does")
    endpoints: dict[str, str] = Field(
        default_factory=dict,
        description="Endpoint path by delivery strategy",
    )


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'degraded'")
    buffer_file_present: bool = Field(..., description="Whether the /buffer backing file exists")
    stream_file_present: bool = Field(..., description="Whether the /stream backing file exists")
    buffer_cached: bool = Field(..., description="Whether the /buffer content is already in memory")
