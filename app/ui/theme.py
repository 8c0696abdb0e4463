from pydantic import BaseModel, ConfigDict

from app.core.config import Settings

class Theme(BaseModel):
    """Colour palette shared by every page. Built once at startup."""
    model_config = ConfigDict(frozen=True)

    primary: str
    accent: str
    background: str
    text: str
    error: str
    header_tint: str

def load_theme(settings: Settings) -> Theme:
    return Theme(
        primary=settings.THEME_PRIMARY,
        accent=settings.THEME_ACCENT,
        background=settings.THEME_BACKGROUND,
        text=settings.THEME_TEXT,
        error=settings.THEME_ERROR,
        header_tint=settings.THEME_HEADER_TINT,
    )
