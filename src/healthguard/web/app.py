"""FastAPI web application."""

from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from .routes import assistant, dashboard, home, hydration, medical, mental, personality, physical

# Paths
WEB_DIR = Path(__file__).parent
STATIC_DIR = WEB_DIR / "static"

# Create FastAPI app
app = FastAPI(
    title="HealthGuard",
    description="Personal wellness dashboard with an AI assistant",
    version="0.1.0",
)

# Mount static files
if STATIC_DIR.exists():
    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

# Include routers
app.include_router(home.router, tags=["home"])
app.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
app.include_router(hydration.router, prefix="/hydration", tags=["hydration"])
app.include_router(assistant.router, prefix="/assistant", tags=["assistant"])
app.include_router(personality.router, prefix="/personality", tags=["personality"])
app.include_router(mental.router, prefix="/mental", tags=["mental"])
app.include_router(physical.router, prefix="/physical", tags=["physical"])
app.include_router(medical.router, prefix="/medical", tags=["medical"])


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "ok"}
