"""
FastAPI server for FX Chart Analyzer Web Interface.

Serves REST API endpoints and the static frontend build when present.
"""

import os
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

import config.config_api as config_api
from web.api import chart_analyzer

# Initialize FastAPI app
app = FastAPI(
    title="FX Chart Analyzer API",
    description="REST API for AI analysis of forex chart images",
    version="1.0.0",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=os.getenv("CORS_ORIGINS", "http://localhost:5173,http://localhost:8000").split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Mount API routes
app.include_router(chart_analyzer.router, prefix="/api", tags=["Chart Analyzer"])

# Get paths
BASE_DIR = Path(__file__).parent
STATIC_DIR = BASE_DIR / "static"
FRONTEND_DIST_DIR = STATIC_DIR / "dist"


@app.get("/")
async def root():
    """Root endpoint - serve the frontend if it has been built."""
    index_path = FRONTEND_DIST_DIR / "index.html"
    if index_path.exists():
        return FileResponse(str(index_path))
    return {
        "message": "FX Chart Analyzer API",
        "status": "running",
        "note": "Frontend not built. Use POST /api/analyze directly.",
    }


@app.get("/health")
async def health_check():
    """
    Health check endpoint.
    Reports whether results come from Gemini or the demo synthesizer.
    """
    return {
        "status": "healthy",
        "mode": "gemini" if config_api.GEMINI_API_KEY else "demo",
        "frontend_dist_exists": FRONTEND_DIST_DIR.exists(),
    }


if FRONTEND_DIST_DIR.exists():
    app.mount("/static", StaticFiles(directory=str(FRONTEND_DIST_DIR)), name="frontend")
