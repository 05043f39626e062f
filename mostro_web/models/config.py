"""
Configuration and settings models
"""
from pathlib import Path
from typing import Dict

from pydantic import BaseModel, Field, field_validator

from mostro_web.core.config import ASSET_DIR_NAME, HOST, PORT, PRODUCT_NAME


class CorsPolicy(BaseModel):
    """Cross-origin headers attached to every response"""
    allow_origin: str = "*"
    allow_methods: str = "*"
    allow_headers: str = "*"

    def headers(self) -> Dict[str, str]:
        """Render the policy as response headers"""
        return {
            "Access-Control-Allow-Origin": self.allow_origin,
            "Access-Control-Allow-Methods": self.allow_methods,
            "Access-Control-Allow-Headers": self.allow_headers,
        }


class ServerSettings(BaseModel):
    """Complete server settings, fixed for the process lifetime"""
    host: str = HOST
    port: int = Field(default=PORT, ge=0, le=65535)
    asset_dir: Path = Field(default=Path(ASSET_DIR_NAME), validate_default=True)
    product_name: str = PRODUCT_NAME
    cors: CorsPolicy = CorsPolicy()

    model_config = {"frozen": True}

    @field_validator("asset_dir")
    @classmethod
    def resolve_asset_dir(cls, value: Path) -> Path:
        # Anchored to the working directory at construction time
        return Path(value).resolve()

    @property
    def url(self) -> str:
        return f"http://{self.host}:{self.port}"

    @property
    def banner(self) -> str:
        """Startup line written to stdout"""
        return f"{self.product_name} running at {self.url}"
