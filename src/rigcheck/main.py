from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from .builder import InvalidCandidateError, check_build, check_compatibility, classify, estimate_wattage
from .config import load_settings
from .logging_config import setup_logging
from .schemas import (
    BuildReport,
    BuildRequest,
    ClassifyRequest,
    CompatibilityLevel,
    CompatibilityResponse,
    PowerResponse,
)

settings = load_settings()
setup_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="RigCheck｜装机兼容性检查")
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_methods=["*"],
    allow_headers=["*"],
)
logger.info("relevance mode: %s", settings.relevance_mode)


@app.get("/api/health")
def health():
    return {"status": "ok", "relevance_mode": settings.relevance_mode}


@app.post("/api/compatibility", response_model=CompatibilityResponse)
def compatibility(payload: BuildRequest):
    return CompatibilityResponse(
        issues=check_compatibility(payload.parts),
        estimated_wattage=estimate_wattage(payload.parts),
    )


@app.post("/api/power", response_model=PowerResponse)
def power(payload: BuildRequest):
    return PowerResponse(estimated_wattage=estimate_wattage(payload.parts))


@app.post("/api/classify", response_model=CompatibilityLevel)
def classify_candidate(payload: ClassifyRequest):
    try:
        return classify(
            payload.category,
            payload.candidate,
            payload.build,
            relevance=settings.relevance_mode,
        )
    except InvalidCandidateError as err:
        logger.warning("rejected candidate: %s", err)
        raise HTTPException(status_code=422, detail=str(err)) from err


@app.post("/api/report", response_model=BuildReport)
def report(payload: BuildRequest):
    return check_build(payload.parts)
