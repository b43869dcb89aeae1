# ABOUTME: Browser frontend route serving the single-page weather and subscription UI.

from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse

STATIC_DIR = Path(__file__).parent.parent / "static"

router = APIRouter()


@router.get("/", include_in_schema=False)
async def index() -> FileResponse:
    """Serve the frontend page."""
    return FileResponse(STATIC_DIR / "index.html", media_type="text/html")
