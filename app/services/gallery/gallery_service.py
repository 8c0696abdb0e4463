import logging
from typing import Optional

from app.services.breeds.label_extractor import breed_slug, format_breed_slug
from app.services.dogs.dog_api_client import DogApiClient
from app.services.gallery.display_state import DisplayState, Failed, Loaded, Loading
from app.utils.error_handling import DogApiError

logger = logging.getLogger(__name__)

class GalleryService:
    """Owns the gallery's DisplayState and moves it through fetch attempts.

    There is no locking or request de-duplication: a fetch started while
    another is in flight simply races it and the last one to finish wins.
    """

    def __init__(self, client: DogApiClient):
        self.client = client
        self._state: DisplayState = Loading()
        self._last_loaded: Optional[Loaded] = None
        self.fetch_count = 0

    @property
    def state(self) -> DisplayState:
        return self._state

    @property
    def has_fetched(self) -> bool:
        return self.fetch_count > 0

    def fetch(self) -> DisplayState:
        """Fetch a new dog and return the resulting state."""
        self._state = Loading(previous=self._last_loaded)
        try:
            api_response = self.client.fetch_random_image()
            image_url = api_response.message
            breed_name = format_breed_slug(breed_slug(image_url))
        except DogApiError as e:
            logger.error(f"Gallery fetch failed ({type(e).__name__}): {e}")
            self._last_loaded = None
            self._state = Failed()
        else:
            self._last_loaded = Loaded(image_url=image_url, breed_name=breed_name)
            self._state = self._last_loaded
            logger.info(f"Gallery loaded breed '{breed_name}'")
        finally:
            self.fetch_count += 1
        return self._state
