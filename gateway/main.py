"""
Payout Gateway — Flipopay payout initiation and callback API.

Validates outbound payout requests, forwards them to the Flipopay payout
API with the merchant secret, and acknowledges Flipopay status webhooks.

Start the server:
    uvicorn gateway.main:app --reload

Or via the console script (honours PORT):
    payout-gateway
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from gateway.api.payouts import router as payouts_router
from gateway.api.webhooks import router as webhooks_router
from gateway.config import Settings, settings
from gateway.upstream import build_provider, create_http_client

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger("payout_gateway")


def _original_url(request: Request) -> str:
    if request.url.query:
        return f"{request.url.path}?{request.url.query}"
    return request.url.path


def not_found_response(request: Request) -> JSONResponse:
    return JSONResponse(
        status_code=404,
        content={
            "status": False,
            "error": "API URL not found",
            "message": f"The requested URL {_original_url(request)} was not found on this server.",
        },
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # A known path with the wrong method is reported like an unknown path.
    if exc.status_code in (404, 405):
        return not_found_response(request)
    return JSONResponse(
        status_code=exc.status_code,
        content={"status": False, "error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"status": False, "error": "Internal Server Error"},
    )


def create_app(config: Settings = settings) -> FastAPI:
    """Build the gateway app around an explicit configuration."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Open the shared upstream client on startup, close it on shutdown."""
        if not config.flipopay_secret_key:
            logger.warning("FLIPOPAY_SECRET_KEY is not set; upstream calls will be unauthenticated")
        client = create_http_client()
        app.state.provider = build_provider(client, config)
        try:
            yield
        finally:
            await client.aclose()

    app = FastAPI(
        title="Payout Gateway",
        description=(
            "Validates payout requests and forwards them to the Flipopay payout API. "
            "Receives Flipopay status callbacks."
        ),
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(payouts_router, prefix="/api")
    app.include_router(webhooks_router)
    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn on the configured port."""
    import uvicorn

    logger.info("Payout gateway listening on port: %d", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
