"""
Pydantic types for the error envelope
"""

from typing import Optional

from pydantic import BaseModel


class DetalleError(BaseModel):
    """
    Error description returned to the client
    """

    status: int
    title: str
    detail: Optional[str] = None
    path: str


class ErrorResponse(BaseModel):
    """
    Envelope for every error response: {"error": {...}}
    """

    error: DetalleError
