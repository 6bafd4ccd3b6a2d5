"""
FastAPI Backend for Bond Desk Intelligence

This is the main entry point for the API server. It provides endpoints for:
- Extracting trade activities from chat transcripts (LLM + direction validation)
- Re-validating trade directions without an LLM call

Architecture Decision:
- Stateless - nothing is persisted here; the caller stores imported activities
- The LLM is the only blocking dependency and runs off the event loop
"""

# Load .env BEFORE any application imports that read os.environ
from dotenv import load_dotenv
load_dotenv()

import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.api.routes import analyze
from bondcrm import __version__
from bondcrm.config.settings import get_settings
from bondcrm.logging_config import configure_logging

configure_logging(get_settings().log_level)

app = FastAPI(
    title="Bond Desk Intelligence API",
    description="API for extracting bond trades from client chat transcripts",
    version=__version__,
)

# CORS - allow the dev server
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:5173", "http://localhost:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# =============================================================================
# API routes - mounted under /api prefix
# =============================================================================

app.include_router(analyze.router, prefix="/api", tags=["Analysis"])


@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": "Bond Desk Intelligence API",
        "docs": "/docs",
        "endpoints": {
            "analyze": "POST /api/analyze-transcript",
            "validate": "POST /api/validate-directions",
            "health": "GET /api/health",
        },
    }


# =============================================================================
# Run with: python -m backend.main
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    port = int(os.environ.get("PORT", 8100))
    uvicorn.run(
        "backend.main:app",
        host="0.0.0.0",
        port=port,
        reload=False,
    )
