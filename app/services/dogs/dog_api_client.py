import logging
from typing import Any, Dict, Optional

import requests
from pydantic import ValidationError

from app.api.v1.models.models import ApiResponse
from app.utils.error_handling import NetworkFailure, NonSuccessStatus, handle_dog_api_errors

logger = logging.getLogger(__name__)

SUCCESS_STATUS = "success"

class DogApiClient:
    """Thin client for the Dog CEO random image endpoint."""

    def __init__(self,
                 api_url: str,
                 timeout: float,
                 session: Optional[requests.Session] = None):
        self.api_url = api_url
        self.timeout = timeout
        self.session = session or requests.Session()
        logger.info(f"DogApiClient initialized for {self.api_url} (timeout={self.timeout}s)")

    @handle_dog_api_errors("Failed to fetch from Dog API")
    def _get_json(self) -> Dict[str, Any]:
        # The API reports failures in the body, so the HTTP status is not checked
        response = self.session.get(self.api_url, timeout=self.timeout)
        return response.json()

    def fetch_random_image(self) -> ApiResponse:
        """Fetch one random image.

        Raises:
            NetworkFailure: transport error, timeout, or an unusable body.
            NonSuccessStatus: the body's status is not "success".
        """
        data = self._get_json()
        if not isinstance(data, dict):
            raise NetworkFailure(f"Unexpected Dog API payload: {data!r}")

        if data.get("status") != SUCCESS_STATUS:
            raise NonSuccessStatus(data.get("status"))

        try:
            api_response = ApiResponse.model_validate(data)
        except ValidationError as e:
            raise NetworkFailure(f"Invalid Dog API payload: {e}") from e

        logger.debug(f"Dog API returned {api_response.message}")
        return api_response

    def close(self) -> None:
        self.session.close()
