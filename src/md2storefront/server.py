"""FastAPI web service for catalog text to HTML rendering.

Endpoints::

    POST /render        Send raw catalog text, receive JSON with the markup.
    POST /render/file   Upload a text file, receive the markup as text/html.
    GET  /health        Health check.
    GET  /profiles      List available markup profiles.

Run::

    uvicorn md2storefront.server:app --host 0.0.0.0 --port 8000
"""

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI, File, Form, HTTPException, UploadFile
from fastapi.responses import HTMLResponse

from md2storefront import __version__
from md2storefront.converter import NO_DESCRIPTION, Converter
from md2storefront.profiles import PROFILES

app = FastAPI(
    title="md2storefront",
    description="Catalog text to storefront HTML rendering service",
    version=__version__,
)


def _converter(profile: str) -> Converter:
    try:
        return Converter(profile=profile)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok", "version": __version__}


@app.get("/profiles")
async def list_profiles() -> dict[str, list[str]]:
    """List available markup profiles."""
    return {"profiles": PROFILES}


@app.post("/render")
async def render_text(
    text: str = Form(""),
    profile: str = Form("semantic"),
    fallback: bool = Form(False),
) -> dict[str, Optional[str]]:
    """Render catalog text and return the markup.

    - **text**: catalog text (may be empty)
    - **profile**: markup profile (semantic, div)
    - **fallback**: render the default sentence when there is no content

    ``html`` is ``null`` when the text holds no value and no fallback was
    requested.
    """
    converter = _converter(profile)
    if fallback:
        html: Optional[str] = converter.convert_with_fallback(text, NO_DESCRIPTION)
    else:
        html = converter.convert_text(text)
    return {"profile": converter.profile.value, "html": html}


@app.post("/render/file", response_class=HTMLResponse)
async def render_file(
    file: UploadFile = File(...),
    profile: str = Form("semantic"),
    encoding: str = Form("utf-8"),
) -> HTMLResponse:
    """Upload a text file and receive its markup.

    - **file**: plain text file
    - **profile**: markup profile (semantic, div)
    - **encoding**: source file encoding
    """
    converter = _converter(profile)
    raw = await file.read()
    try:
        text = raw.decode(encoding)
    except (UnicodeDecodeError, LookupError) as exc:
        raise HTTPException(status_code=400, detail=f"Cannot decode upload: {exc}") from exc
    return HTMLResponse(content=converter.convert_text(text) or "")
