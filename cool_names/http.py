"""
HTTP adapter
============
Serves generated names on ``GET /`` and ``GET /api/name``.

The response format follows the ``Accept`` header: clients listing
``text/html`` get an HTML page, everyone else (no header, ``*/*``,
``application/json``, garbage) gets JSON.
"""
import html
from typing import List, Optional

from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse, Response
from loguru import logger
from pydantic import BaseModel

from .errors import DomainError
from .name_generator import NameGenerator

HTML_MEDIA_TYPE = "text/html"

router = APIRouter()


class CoolNameResponse(BaseModel):
    name: str


class ErrorResponse(BaseModel):
    error: str


def accepts_html(accept: Optional[str]) -> bool:
    if not accept:
        return False

    for media_range in accept.split(","):
        media_type, *params = media_range.split(";")
        if media_type.strip().lower() != HTML_MEDIA_TYPE:
            continue

        quality = 1.0
        for param in params:
            key, _, value = param.partition("=")
            if key.strip().lower() == "q":
                try:
                    quality = float(value.strip())
                except ValueError:
                    quality = 0.0

        if quality > 0:
            return True

    return False


def render_name_page(name: str) -> str:
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '    <meta charset="UTF-8">\n'
        "    <title>Cool Names</title>\n"
        "</head>\n"
        "<body>\n"
        f'    <div class="name-box">{html.escape(name)}</div>\n'
        '    <button onclick="location.reload()">Generate another</button>\n'
        "</body>\n"
        "</html>"
    )


def render_error_page(message: str) -> str:
    return f"<html><body><h1>Error</h1><p>{html.escape(message)}</p></body></html>"


@router.get("/")
@router.get("/api/name")
async def generate_name(request: Request) -> Response:
    name_generator: NameGenerator = request.app.state.name_generator
    wants_html = accepts_html(request.headers.get("accept"))
    headers = {"Vary": "Accept"}

    try:
        cool_name = name_generator.generate()
    except DomainError as e:
        logger.warning(f"Name generation failed: {e}")

        if wants_html:
            return HTMLResponse(content=render_error_page(str(e)), status_code=500, headers=headers)

        return JSONResponse(content=ErrorResponse(error=str(e)).model_dump(), status_code=500, headers=headers)

    name = str(cool_name)

    if wants_html:
        return HTMLResponse(content=render_name_page(name), headers=headers)

    return JSONResponse(content=CoolNameResponse(name=name).model_dump(), headers=headers)


def create_app(name_generator: NameGenerator, cors_origins: Optional[List[str]] = None) -> FastAPI:
    app = FastAPI(title="Cool Names", docs_url=None, redoc_url=None)
    app.state.name_generator = name_generator

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins if cors_origins is not None else ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router)

    return app
