from __future__ import annotations
import os
import time
from datetime import datetime, timezone
from typing import Dict, List

import polars as pl
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.requests import Request
from fastapi.responses import JSONResponse

from schema_detection.api.models import DetectRequest, DetectorInfo, DetectorList, HealthStatus
from schema_detection.config import load_settings
from schema_detection.inference import build_detection_context
from schema_detection.service import create_detection_service
from schema_detection.types import DetectionContext, DetectorConfig, FieldStatistics
from schema_detection.utils.logger import configure_logger, logger

API_TITLE = "Schema Detection API"
API_VERSION = os.getenv("API_VERSION", "v1")

settings = load_settings()
configure_logger(settings.log_level, settings.log_file)
service = create_detection_service(settings)

app = FastAPI(title=API_TITLE, version=API_VERSION, openapi_url="/openapi.json")

# CORS
origins = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request Logging Middleware
@app.middleware("http")
async def log_requests(request, call_next):
    start_time = time.time()
    try:
        response = await call_next(request)
        process_time = (time.time() - start_time) * 1000

        log_data = {
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "duration_ms": round(process_time, 2),
        }
        logger.info(f"Request processed: {log_data}")
        return response
    except Exception as e:
        process_time = (time.time() - start_time) * 1000
        logger.error(f"Request failed: {request.method} {request.url.path} - {str(e)} - {process_time:.2f}ms")
        raise


# Global Exception Handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception: {str(exc)}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal Server Error", "error": str(exc)},
    )


@app.get("/api/v1/health", response_model=HealthStatus)
def health():
    return {
        "status": "ok",
        "time": datetime.now(timezone.utc).isoformat(),
        "version": API_VERSION,
    }


@app.get("/api/v1/detectors", response_model=DetectorList)
def list_detectors():
    default = service.default_detector
    items = [
        DetectorInfo(
            name=d.name,
            label=d.label,
            description=d.description,
            is_default=d is default,
        )
        for d in service.get_all_detectors()
    ]
    return {"items": items}


def _rows_to_frame(rows: List[Dict]) -> pl.DataFrame:
    if not rows:
        return pl.DataFrame()
    return pl.from_dicts(rows, infer_schema_length=None, strict=False)


def _build_context(payload: DetectRequest) -> DetectionContext:
    config = DetectorConfig(**payload.config.model_dump()) if payload.config else DetectorConfig()
    sample_rows = payload.sample_rows or settings.sample_rows

    if payload.field_stats is not None:
        field_stats = {
            path: FieldStatistics.from_dict(data, path=path)
            for path, data in payload.field_stats.items()
        }
        headers = payload.headers or list(field_stats)
        return DetectionContext(
            field_stats=field_stats,
            sample_data=list(payload.rows[:sample_rows]),
            headers=headers,
            config=config,
        )

    context = build_detection_context(
        _rows_to_frame(payload.rows),
        config=config,
        sample_rows=sample_rows,
        max_unique_samples=settings.max_unique_samples,
    )
    if payload.headers:
        context.headers = list(payload.headers)
    return context


@app.post("/api/v1/schema/detect")
def detect_schema(payload: DetectRequest):
    context = _build_context(payload)
    result = service.detect(payload.detector or settings.default_detector, context)
    return result.to_dict()
