"""
Frontend router.
Serves the prebuilt client bundle from the configured static directories.
"""
from fastapi import APIRouter, Request, HTTPException
from fastapi.responses import FileResponse, HTMLResponse
from pathlib import Path
from typing import List, Optional
import logging

logger = logging.getLogger(__name__)

router = APIRouter(include_in_schema=False)

PLACEHOLDER_PAGE = (
    "<h1>Welcome to Employee Management System</h1>"
    "<p>Please build the frontend or start the client view.</p>"
)


def find_static_file(static_dirs: List[str], relative_path: str) -> Optional[Path]:
    """
    Look a file up in each static directory, first hit wins.

    Paths resolving outside a directory are ignored.

    Args:
        static_dirs: Directories to search, in order
        relative_path: Requested path relative to the bundle root

    Returns:
        Path of the file, or None
    """
    for directory in static_dirs:
        root = Path(directory).resolve()
        if not root.is_dir():
            continue
        candidate = (root / relative_path).resolve()
        if root != candidate and root not in candidate.parents:
            continue
        if candidate.is_file():
            return candidate
    return None


@router.get("/", response_model=None)
async def index(request: Request):
    """Serve the bundle entry page, or a placeholder if none is built."""
    index_file = find_static_file(request.app.state.settings.STATIC_DIRS, "index.html")
    if index_file:
        return FileResponse(index_file)
    return HTMLResponse(PLACEHOLDER_PAGE)


@router.get("/{asset_path:path}", response_model=None)
async def static_asset(asset_path: str, request: Request):
    """Serve a static asset from the first directory that has it."""
    asset = find_static_file(request.app.state.settings.STATIC_DIRS, asset_path)
    if asset is None:
        raise HTTPException(status_code=404, detail="Not Found")
    return FileResponse(asset)
