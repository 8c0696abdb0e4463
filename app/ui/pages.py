"""Home and Gallery pages."""

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from app.core.config import settings
from app.services.gallery.gallery_service import GalleryService
from app.ui.renderer import render
from app.ui.theme import Theme
from app.main import get_gallery_service, get_theme

logger = logging.getLogger(__name__)

router = APIRouter()
templates = Jinja2Templates(directory=str(settings.TEMPLATES_DIR))

@router.get("/", response_class=HTMLResponse, name="home")
def home(request: Request, theme: Theme = Depends(get_theme)):
    return templates.TemplateResponse(
        request,
        "home.html",
        {"page_title": "Home", "theme": theme, "show_back": False},
    )

@router.get("/gallery", response_class=HTMLResponse, name="gallery")
def gallery(
    request: Request,
    service: GalleryService = Depends(get_gallery_service),
    theme: Theme = Depends(get_theme)
):
    # The first visit loads a dog; later visits show whatever is current
    if not service.has_fetched:
        service.fetch()
    return templates.TemplateResponse(
        request,
        "gallery.html",
        {
            "page_title": "API Gallery",
            "theme": theme,
            "show_back": True,
            "view": render(service.state, theme),
        },
    )

@router.post("/gallery/fetch", name="gallery_fetch")
def gallery_fetch(request: Request, service: GalleryService = Depends(get_gallery_service)):
    service.fetch()
    return RedirectResponse(request.url_for("gallery"), status_code=status.HTTP_303_SEE_OTHER)
