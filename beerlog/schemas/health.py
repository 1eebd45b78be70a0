from typing import Dict

from pydantic import BaseModel


class ServiceHealth(BaseModel):
    healthy: bool
    message: str


class HealthCheckResponse(BaseModel):
    service: str
    version: str
    environment: str
    timestamp: str
    healthy: bool
    database: ServiceHealth
    # Informational, never fails the check
    warnings: Dict[str, str] = {}
