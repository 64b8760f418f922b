"""FastAPI entrypoint and HTTP routes."""

from __future__ import annotations

import logging
from typing import AsyncIterator

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response

from moodstylist.api.gateway_client import GatewayClient
from moodstylist.config.settings import Settings, get_settings
from moodstylist.monitoring.logging import configure_logging
from moodstylist.services.errors import OutfitGenerationError
from moodstylist.services.models import OutfitRequest
from moodstylist.services.outfit import OutfitOrchestrator

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}


def _error_response(message: str) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=500)


async def get_orchestrator(
    settings: Settings = Depends(get_settings),
) -> AsyncIterator[OutfitOrchestrator]:
    """Yield an orchestrator bound to a per-request gateway client."""

    client = GatewayClient(settings)
    try:
        yield OutfitOrchestrator(settings, client)
    finally:
        await client.close()


def create_app() -> FastAPI:
    """Initialise the FastAPI application."""

    settings = get_settings()
    app = FastAPI(
        title="AI Mood Stylist API",
        version="0.1.0",
        docs_url="/docs" if settings.environment != "prod" else None,
        redoc_url="/redoc" if settings.environment != "prod" else None,
    )

    @app.middleware("http")
    async def apply_cors(request: Request, call_next) -> Response:
        """Answer preflight requests directly and tag every response with CORS headers."""

        if request.method == "OPTIONS":
            return Response(status_code=204, headers=CORS_HEADERS)
        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response

    @app.exception_handler(RequestValidationError)
    async def handle_invalid_body(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.warning("Rejected outfit request body: %s", exc.errors())
        return _error_response("Invalid request: gender and mood are required")

    @app.get("/health", tags=["system"])
    async def health_check() -> dict[str, str]:
        """Simple health endpoint used for readiness probes."""

        return {"status": "ok"}

    @app.post("/generate-outfit", tags=["outfits"])
    async def generate_outfit(
        payload: OutfitRequest,
        orchestrator: OutfitOrchestrator = Depends(get_orchestrator),
    ) -> JSONResponse:
        """Generate three outfit suggestions for the requested mood and style."""

        try:
            outfits = await orchestrator.generate(payload.to_selection())
        except OutfitGenerationError as exc:
            logger.error("Outfit generation failed: %s", exc)
            return _error_response(str(exc))
        except Exception:
            logger.exception("Unexpected error while generating outfits")
            return _error_response("Unknown error")

        return JSONResponse({"outfits": [outfit.to_public() for outfit in outfits]})

    return app


app = create_app()


def run() -> None:
    """Serve the API with uvicorn."""

    import uvicorn

    configure_logging()
    uvicorn.run(app, host="0.0.0.0", port=8000)


if __name__ == "__main__":
    run()
