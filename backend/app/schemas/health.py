"""
Pydantic schema for the health check.
"""
from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    time: str
