"""Pydantic models for the service status endpoint."""

from pydantic import BaseModel


class HealthRead(BaseModel):
    """Basic liveness information."""

    status: str
    database: bool


__all__ = ["HealthRead"]
