from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.engine.errors import InvalidArgumentError
from app.engine.router import router as engine_router
from app.logging_setup import configure_logging

configure_logging()

app = FastAPI(title="Nutrition Metrics Engine", version="0.1.0")
app.include_router(engine_router)


@app.exception_handler(InvalidArgumentError)
async def invalid_argument_handler(request: Request, exc: InvalidArgumentError) -> JSONResponse:
    return JSONResponse(status_code=422, content={"detail": exc.message, "field": exc.field})


@app.get("/")
async def root() -> dict:
    return {
        "status": "ok",
        "docs": "/docs",
        "health": "/health",
        "engine": {
            "targets": "/engine/targets",
            "confidence": "/engine/confidence",
            "trends": "/engine/trends",
            "compare": "/engine/compare",
            "compare_presets": "/engine/compare/presets/{id}",
            "filter": "/engine/filter",
            "streak": "/engine/streak",
            "habits": "/engine/habits",
            "momentum": "/engine/momentum",
            "weight": "/engine/weight",
            "presets": "/engine/presets",
        },
    }


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
