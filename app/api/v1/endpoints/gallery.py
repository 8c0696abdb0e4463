import logging

from fastapi import APIRouter, Depends

from app.services.gallery.display_state import flatten
from app.services.gallery.gallery_service import GalleryService
from app.api.v1.models.models import DisplayStateOut
from app.main import get_gallery_service

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("/gallery", response_model=DisplayStateOut)
def api_gallery_state(gallery: GalleryService = Depends(get_gallery_service)) -> DisplayStateOut:
    """Current gallery state."""
    return DisplayStateOut(**flatten(gallery.state))

@router.post("/gallery/fetch", response_model=DisplayStateOut)
def api_gallery_fetch(gallery: GalleryService = Depends(get_gallery_service)) -> DisplayStateOut:
    """Fetch another dog. Failures are reported through the state, not the status code."""
    return DisplayStateOut(**flatten(gallery.fetch()))
