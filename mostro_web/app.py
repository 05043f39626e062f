"""
Main FastAPI application - static asset server with permissive CORS
"""
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from mostro_web.core.config import API_CONFIG
from mostro_web.core.cors import install_cors
from mostro_web.core.utils import get_logger
from mostro_web.models import ServerErrorResponse, ServerSettings
from mostro_web.services.static_files import StaticAssets

logger = get_logger("main")


def create_app(settings: Optional[ServerSettings] = None) -> FastAPI:
    """Build the application serving settings.asset_dir"""
    settings = settings or ServerSettings()

    # No docs or schema routes, they would shadow files under the asset root
    app = FastAPI(
        title=API_CONFIG["title"],
        version=API_CONFIG["version"],
        description=API_CONFIG["description"],
        docs_url=None,
        redoc_url=None,
        openapi_url=None
    )
    app.state.settings = settings

    if not settings.asset_dir.is_dir():
        logger.warning(
            f"Asset directory {settings.asset_dir} does not exist, all requests will 404",
            extra={"asset_dir": str(settings.asset_dir)}
        )

    install_cors(app, settings.cors)

    cors_headers = settings.cors.headers()

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception):
        logger.error("Unhandled error", extra={
            "path": request.url.path,
            "error": str(exc)
        }, exc_info=exc)
        return JSONResponse(
            status_code=500,
            content=ServerErrorResponse().model_dump(),
            headers=cors_headers
        )

    # Mount static files
    app.state.static_files = StaticAssets(settings.asset_dir)
    app.mount("/", app.state.static_files, name="web")
    return app
