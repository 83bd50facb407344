"""Envelope helper — builds JSONResponse objects from WebResponse."""

from typing import Any

from fastapi.responses import JSONResponse

from storefront.schemas.envelope import WebResponse


def envelope(code: int, status_text: str, data: Any = None) -> JSONResponse:
    return JSONResponse(
        status_code=code,
        content=WebResponse(code=code, status=status_text, data=data).to_content(),
    )
