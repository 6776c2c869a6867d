"""Web UI for HealthGuard."""

import uvicorn


def run(host: str = "127.0.0.1", port: int = 8000, reload: bool = True):
    """Run the web server."""
    uvicorn.run(
        "healthguard.web.app:app",
        host=host,
        port=port,
        reload=reload,
    )


__all__ = ["run"]
