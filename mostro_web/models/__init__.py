"""
Centralized model imports for easy access across the application
"""

# Config models
from .config import (
    CorsPolicy,
    ServerSettings
)

# Error models
from .errors import (
    ServerErrorResponse
)

__all__ = [
    # Config
    "CorsPolicy",
    "ServerSettings",

    # Errors
    "ServerErrorResponse",
]
