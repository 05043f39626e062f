"""
Error models for consistent error responses
"""
from pydantic import BaseModel


class ServerErrorResponse(BaseModel):
    """Internal server error response"""
    error: str = "internal_server_error"
    message: str = "An unexpected error occurred"
