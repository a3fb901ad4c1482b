from __future__ import annotations

from fastapi import FastAPI

import treino.db.base  # noqa: F401  registra todos os models no metadata
from treino.api.main import api_router
from treino.core.errors import register_exception_handlers
from treino.core.logging import configure_logging, get_logger
from treino.core.settings import settings
from treino.middlewares.cors import OpenCORSMiddleware
from treino.middlewares.telemetry import RequestContextMiddleware
from treino.version import APP_VERSION, version_info

configure_logging(json=settings.LOG_JSON, level=settings.LOG_LEVEL)

app = FastAPI(title="Treino API", version=APP_VERSION, debug=settings.DEBUG)

# --- Middlewares de contexto/log (o último adicionado roda primeiro)
app.add_middleware(RequestContextMiddleware)

# --- CORS aberto; preflight respondido aqui sem chegar às rotas
app.add_middleware(OpenCORSMiddleware)

register_exception_handlers(app)

app.include_router(api_router)


# --- Endpoints
@app.get("/healthz", tags=["ops"])
def healthz():
    get_logger().info("health.check")
    return {"status": "ok", "env": settings.APP_ENV, "version": APP_VERSION}


@app.get("/version", tags=["ops"])
def version():
    return {
        **version_info(),
        "env": settings.APP_ENV,
        "debug": settings.DEBUG,
    }
