"""Run the HTTP server."""

import uvicorn


def serve(host: str = "127.0.0.1", port: int = 8000, reload: bool = False) -> None:
    """Start the MvcMovie API server in the foreground.

    Args:
        host: Host to bind to.
        port: Port to listen on.
        reload: Restart when source files change (development only).
    """
    uvicorn.run(
        "mvcmovie.application.api.rest.main:app",
        host=host,
        port=port,
        reload=reload,
        log_config=None,  # configure_logging owns the handlers
    )
