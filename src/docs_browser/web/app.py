"""FastAPI application factory for both server variants."""

from pathlib import Path

from fastapi import FastAPI, HTTPException
from fastapi.responses import FileResponse, Response
from fastapi.staticfiles import StaticFiles

from docs_browser import __version__
from docs_browser.config import THEMES, ServerSettings
from docs_browser.core.document.markdown import highlight_stylesheet
from docs_browser.web import api, pages

STATIC_DIR = Path(__file__).parent / "static"
CLIENT_ENTRY = STATIC_DIR / "index.html"


def create_app(settings: ServerSettings | None = None) -> FastAPI:
    """Build the app. `settings.mode` picks the single-page or server-rendered variant."""
    settings = settings or ServerSettings.from_env()

    app = FastAPI(
        title="Documentation Browser",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings

    app.include_router(api.router)
    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    @app.get("/highlight/{theme}.css")
    def highlight_css(theme: str) -> Response:
        if theme not in THEMES:
            raise HTTPException(status_code=404, detail="Unknown theme")
        return Response(highlight_stylesheet(theme), media_type="text/css")

    if settings.mode == "pages":
        app.include_router(pages.router)
    else:

        @app.get("/{full_path:path}", include_in_schema=False)
        def client_entry(full_path: str) -> FileResponse:
            return FileResponse(CLIENT_ENTRY, media_type="text/html")

    return app
