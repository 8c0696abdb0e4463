"""Turns a gallery DisplayState into the strings and flags a page shows."""

from dataclasses import dataclass
from typing import Optional

from app.services.gallery.display_state import DisplayState, Failed
from app.ui.theme import Theme

TITLE = "Dog Gallery (API)"
LOADING_BREED = "Loading breed..."
UNKNOWN_BREED_LABEL = "Unknown"
FETCHING_IMAGE = "Fetching image..."
FAILED_IMAGE = "Failed to load image."
BUTTON_BUSY = "Please wait"
BUTTON_IDLE = "New Dog"


@dataclass(frozen=True)
class GalleryView:
    title: str
    breed_text: str
    image_url: Optional[str]
    loading: bool
    failed: bool
    status_text: Optional[str]
    button_label: str
    button_disabled: bool
    theme: Theme


def render(state: DisplayState, theme: Theme) -> GalleryView:
    shown = state.displayed
    if state.loading:
        breed_text = LOADING_BREED
        status_text = FETCHING_IMAGE
    else:
        breed_name = shown.breed_name if shown else None
        breed_text = f"Breed: {breed_name or UNKNOWN_BREED_LABEL}"
        status_text = FAILED_IMAGE if shown is None else None

    return GalleryView(
        title=TITLE,
        breed_text=breed_text,
        # The spinner replaces the image while loading
        image_url=None if state.loading or shown is None else shown.image_url,
        loading=state.loading,
        failed=isinstance(state, Failed),
        status_text=status_text,
        button_label=BUTTON_BUSY if state.loading else BUTTON_IDLE,
        button_disabled=state.loading,
        theme=theme,
    )
