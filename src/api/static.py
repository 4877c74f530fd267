"""Serving the built front-end in production."""

from pathlib import Path

import structlog
from fastapi import FastAPI
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = structlog.get_logger()


def mount_client(app: FastAPI, build_dir: Path) -> bool:
    """Serve files from ``build_dir``, falling back to ``index.html``.

    Must be called after the API routers are included, since the fallback
    route matches every path. Returns False when there is no build to serve.
    """
    root = build_dir.resolve()
    index_file = root / "index.html"
    if not index_file.is_file():
        logger.warning("client_build_missing", build_dir=str(root))
        return False

    assets_dir = root / "static"
    if assets_dir.is_dir():
        app.mount("/static", StaticFiles(directory=assets_dir), name="static")

    @app.get("/{full_path:path}", include_in_schema=False)
    async def serve_client(full_path: str) -> FileResponse:
        if full_path == "api" or full_path.startswith("api/"):
            raise StarletteHTTPException(status_code=404, detail="Not Found")

        candidate = (root / full_path).resolve()
        if full_path and candidate.is_file() and candidate.is_relative_to(root):
            return FileResponse(candidate)
        return FileResponse(index_file)

    logger.info("client_build_mounted", build_dir=str(root))
    return True
