"""HTTP client for the restaurants API."""

import logging

import httpx
from pydantic import ValidationError

from restaurant_wall.models import Restaurant, restaurant_list_adapter

logger = logging.getLogger(__name__)


class RestaurantApiError(Exception):
    """Raised when a request to the restaurants API does not succeed."""


class RestaurantApiClient:
    """Client for ``GET`` and ``POST`` on ``{base_url}/restaurants``.

    A fresh ``httpx.AsyncClient`` is opened for every request. No timeout is
    configured beyond httpx's defaults.
    """

    def __init__(
        self,
        base_url: str,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: API root, e.g. ``http://localhost:3000/api``
            transport: Optional httpx transport (used by tests)
        """
        self.base_url = base_url.rstrip("/")
        self.transport = transport

    @property
    def restaurants_url(self) -> str:
        return f"{self.base_url}/restaurants"

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=self.transport, follow_redirects=True)

    async def list_restaurants(self) -> list[Restaurant]:
        """Fetch the full restaurant collection.

        Returns:
            Restaurants in the order the API returned them

        Raises:
            RestaurantApiError: On transport errors, non-2xx responses,
                non-JSON bodies or records that fail validation
        """
        try:
            async with self._client() as client:
                response = await client.get(self.restaurants_url)
        except httpx.HTTPError as e:
            msg = f"GET {self.restaurants_url} failed: {e}"
            raise RestaurantApiError(msg) from e

        if not response.is_success:
            msg = f"GET {self.restaurants_url} returned {response.status_code}"
            raise RestaurantApiError(msg)

        try:
            return restaurant_list_adapter.validate_json(response.content)
        except ValidationError as e:
            msg = f"GET {self.restaurants_url} returned malformed data: {e}"
            raise RestaurantApiError(msg) from e

    async def create_restaurant(self, restaurant: Restaurant) -> None:
        """Post a complete restaurant record. The response body is ignored.

        Raises:
            RestaurantApiError: On transport errors or non-2xx responses
        """
        try:
            async with self._client() as client:
                response = await client.post(
                    self.restaurants_url, json=restaurant.to_payload()
                )
        except httpx.HTTPError as e:
            msg = f"POST {self.restaurants_url} failed: {e}"
            raise RestaurantApiError(msg) from e

        if not response.is_success:
            msg = f"POST {self.restaurants_url} returned {response.status_code}"
            raise RestaurantApiError(msg)

        logger.info(f"Created restaurant {restaurant.id} ({restaurant.name})")
