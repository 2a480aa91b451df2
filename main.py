from __future__ import annotations

import logging
import time
import uuid

from fastapi import FastAPI, Request

from quillnote_api.dependencies import get_repository, get_settings
from quillnote_api.interface.api.responses import AsciiJSONResponse
from quillnote_api.interface.api.routes import router


def create_app() -> FastAPI:
    app = FastAPI(title="Quillnote API", version="0.1.0", default_response_class=AsciiJSONResponse)

    settings = get_settings()
    # Load both collections up front so a broken store shows up at boot.
    get_repository()

    logger = logging.getLogger("quillnote.api")

    @app.middleware("http")
    async def request_id_and_logging(request: Request, call_next):
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        request.state.request_id = request_id
        start = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            dt_ms = (time.perf_counter() - start) * 1000.0
            logger.exception("request_error", extra={"rid": request_id, "path": request.url.path, "ms": dt_ms})
            return AsciiJSONResponse(
                status_code=500,
                content={"detail": "internal_error", "request_id": request_id},
                headers={"X-Request-ID": request_id},
            )

        dt_ms = (time.perf_counter() - start) * 1000.0
        extra = {
            "rid": request_id,
            "method": request.method,
            "path": request.url.path,
            "status": response.status_code,
            "ms": dt_ms,
        }
        if settings.api_debug_log:
            extra["query"] = request.url.query
        logger.info("request", extra=extra)
        response.headers["X-Request-ID"] = request_id
        return response

    app.include_router(router)
    return app
