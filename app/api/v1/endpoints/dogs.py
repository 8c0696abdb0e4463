import logging

from fastapi import APIRouter, Query, Depends

from app.services.breeds.label_extractor import breed_slug, extract_breed_label, format_breed_slug
from app.services.dogs.dog_api_client import DogApiClient
from app.api.v1.models.models import BreedLabel, DogImage
from app.main import get_dog_api_client

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get(
    "/dogs/random",
    response_model=DogImage,
    responses={
        200: {"description": "A random dog image with its breed label"},
        502: {"description": "The Dog API failed or answered with a non-success status"},
        503: {"description": "Service Unavailable"}
    }
)
def random_dog(client: DogApiClient = Depends(get_dog_api_client)) -> DogImage:
    """Fetch one random dog without touching the gallery state."""
    api_response = client.fetch_random_image()
    # A URL without a breed segment raises MalformedUrl, answered with 502
    breed_name = format_breed_slug(breed_slug(api_response.message))
    return DogImage(image_url=api_response.message, breed_name=breed_name)

@router.get(
    "/breeds/label",
    response_model=BreedLabel
)
def breed_label(
    url: str = Query(..., description="Dog CEO image URL, e.g. https://images.dog.ceo/breeds/poodle/n1.jpg")
) -> BreedLabel:
    """Label an image URL. Malformed URLs yield the "unknown" label."""
    logger.info(f"Labelling URL: '{url}'")
    return BreedLabel(url=url, breed_name=extract_breed_label(url))
