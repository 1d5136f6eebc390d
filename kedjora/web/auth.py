"""Login page. The form posts JSON to the auth API; the guard keeps signed-in users out."""

from typing import Annotated

from fastapi import APIRouter, Query, Request
from fastapi.responses import HTMLResponse

from kedjora.web import templates

router = APIRouter()


@router.get("/login", response_class=HTMLResponse)
def login_page(
    request: Request,
    callback_url: Annotated[str | None, Query(alias="callbackUrl", max_length=2048)] = None,
) -> HTMLResponse:
    settings = request.app.state.settings
    return templates.TemplateResponse(
        request,
        "auth/login.html",
        {
            "site_name": settings.SITE_NAME,
            "api_prefix": settings.API_PREFIX,
            "callback_url": callback_url or "",
        },
    )
