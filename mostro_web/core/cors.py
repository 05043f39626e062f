"""
Permissive CORS layer for local development
"""
from fastapi import FastAPI, Request, Response

from mostro_web.models import CorsPolicy


def install_cors(app: FastAPI, policy: CorsPolicy) -> None:
    """Stamp the policy headers on every response and answer any OPTIONS with 204"""
    cors_headers = policy.headers()

    @app.middleware("http")
    async def apply_cors_policy(request: Request, call_next):
        if request.method == "OPTIONS":
            return Response(status_code=204, headers=cors_headers)

        response = await call_next(request)
        response.headers.update(cors_headers)
        return response
