"""Landing Page — serves the HTML forms for creating users and logging exercises.

Invariants:
    - GET / returns <views_dir>/index.html (relative to the working directory)
    - Missing page is a 404, not a crash
"""

from pathlib import Path

from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import FileResponse

router = APIRouter(tags=["landing"])


@router.get("/", include_in_schema=False)
async def landing_page(request: Request):
    page = Path(request.app.state.settings.views_dir) / "index.html"
    if not page.is_file():
        raise HTTPException(status.HTTP_404_NOT_FOUND, detail="Not Found")
    return FileResponse(page)
