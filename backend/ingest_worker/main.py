"""Main FastAPI application."""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from ingest_worker.config import settings
from ingest_worker.api import ingest
from ingest_worker.schemas.ingest import HealthResponse

app = FastAPI(
    title="Web Vitals Ingest Worker",
    description="Validates, enriches and forwards web vitals beacons",
    version="0.1.0",
)

# Beacons are posted cross-origin from monitored sites
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(ingest.router)


@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse()
