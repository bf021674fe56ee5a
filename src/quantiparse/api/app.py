from __future__ import annotations

import uuid

from fastapi import FastAPI, Request

from quantiparse.api.routes_quantities import router as quantities_router
from quantiparse.config import ENGINE_VERSION, configure_logging
from quantiparse.observability import bind_run_id, reset_run_id

configure_logging()

app = FastAPI(title="quantiparse", version=ENGINE_VERSION)
app.include_router(quantities_router)


@app.middleware("http")
async def run_id_middleware(request: Request, call_next):
    token = bind_run_id(request.headers.get("X-Run-ID") or str(uuid.uuid4()))
    try:
        return await call_next(request)
    finally:
        reset_run_id(token)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok", "engine_version": ENGINE_VERSION}
