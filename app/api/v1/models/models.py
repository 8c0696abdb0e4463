from pydantic import BaseModel, ConfigDict
from typing import Optional

class ApiResponse(BaseModel):
    """Body of the Dog CEO random image endpoint."""
    model_config = ConfigDict(frozen=True)

    message: str
    status: str

class DogImage(BaseModel):
    """A fetched image with its breed label."""
    image_url: str
    breed_name: str

class BreedLabel(BaseModel):
    """Result of labelling a single image URL."""
    url: str
    breed_name: str

class DisplayStateOut(BaseModel):
    """Flat view of the gallery state."""
    breed_name: Optional[str] = None
    image_url: Optional[str] = None
    loading: bool
