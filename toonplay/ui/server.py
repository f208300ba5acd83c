"""FastAPI server for the toonplay playground."""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from toonplay.config import PlaygroundConfig
from toonplay.session import Playground


class FocusRequest(BaseModel):
    id: str


class EditRequest(BaseModel):
    id: str
    text: str


class OptionsRequest(BaseModel):
    indent: Optional[int] = None
    delimiter: Optional[str] = None


class RestoreRequest(BaseModel):
    token: str


def _not_found(format_id: str) -> JSONResponse:
    return JSONResponse(status_code=404, content={"error": f"Unknown representation: {format_id}"})


def create_app(
    config: Optional[PlaygroundConfig] = None,
    playground: Optional[Playground] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    The app serves a single playground session. Format libraries and the
    tokenizer load in the background once the server starts.
    """
    if playground is None:
        playground = Playground(config=config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await playground.start()
        yield

    app = FastAPI(
        title="toonplay",
        version="0.1.0",
        docs_url=None,
        redoc_url=None,
        lifespan=lifespan,
    )
    app.state.playground = playground

    @app.get("/api/state")
    async def api_state():
        """Every pane, token costs, options and the share link."""
        return playground.snapshot()

    @app.post("/api/focus")
    async def api_focus(body: FocusRequest):
        """Mark a pane active."""
        try:
            playground.focus(body.id)
        except KeyError:
            return _not_found(body.id)
        return playground.snapshot()

    @app.post("/api/edit")
    async def api_edit(body: EditRequest):
        """Replace a pane's text and propagate it."""
        try:
            playground.edit(body.id, body.text)
        except KeyError:
            return _not_found(body.id)
        return playground.snapshot()

    @app.post("/api/options")
    async def api_options(body: OptionsRequest):
        """Change indent width and/or delimiter."""
        try:
            playground.set_options(indent_width=body.indent, delimiter=body.delimiter)
        except ValueError as e:
            return JSONResponse(status_code=400, content={"error": str(e)})
        return playground.snapshot()

    @app.post("/api/restore")
    async def api_restore(body: RestoreRequest):
        """Load a shared session; unreadable tokens load the defaults."""
        restored = playground.restore(body.token)
        return {"restored": restored, **playground.snapshot()}

    @app.get("/api/share")
    async def api_share():
        """Current share link."""
        url = playground.share()
        return {"url": url, "token": playground.address_bar.fragment}

    @app.get("/api/copy/{format_id}")
    async def api_copy(format_id: str):
        """Text of one pane."""
        try:
            text = playground.copy_text(format_id)
        except KeyError:
            return _not_found(format_id)
        return {"id": format_id, "text": text}

    return app
