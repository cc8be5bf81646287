"""Retrieval service - loads restaurants through a chain of fallbacks."""

import logging
from collections.abc import Awaitable, Callable

import httpx

from restaurant_wall.config import Config, get_config
from restaurant_wall.models import Restaurant
from restaurant_wall.services.api_client import RestaurantApiClient, RestaurantApiError
from restaurant_wall.store import (
    AppStore,
    clear_error,
    set_error,
    set_loading,
    set_restaurants,
)

logger = logging.getLogger(__name__)

FALLBACK_API_URL = "http://localhost:3000/api"
LOAD_ERROR_MESSAGE = "Failed to load restaurants. Please try again later."

Source = Callable[[], Awaitable[list[Restaurant]]]


class RetrievalService:
    """Keeps the store's restaurant collection in sync with the API.

    Sources are tried in order until one succeeds:
    1. The configured API (``API_URL``)
    2. The local development API at ``FALLBACK_API_URL``
    3. The snapshot in local storage
    """

    def __init__(
        self,
        store: AppStore,
        config: Config | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the retrieval service.

        Args:
            store: Application store to update
            config: Configuration (defaults to the global config)
            transport: Optional httpx transport shared by both API clients
        """
        self.config = config or get_config()
        self.store = store
        self.primary = RestaurantApiClient(self.config.api_url, transport=transport)
        self.fallback = RestaurantApiClient(FALLBACK_API_URL, transport=transport)
        self.sources: list[tuple[str, Source]] = [
            ("primary API", self.primary.list_restaurants),
            ("fallback API", self.fallback.list_restaurants),
        ]

    async def _fetch_first_available(self) -> list[Restaurant] | None:
        for label, source in self.sources:
            try:
                restaurants = await source()
            except RestaurantApiError as e:
                logger.warning(f"{label} error: {e}")
                continue

            logger.info(f"Loaded {len(restaurants)} restaurants from {label}")
            return restaurants

        return None

    async def refresh(self) -> tuple[Restaurant, ...]:
        """Reload the restaurant collection.

        On success the collection is replaced and the error cleared. When every
        network source fails the error is set, then the cached snapshot is
        adopted (clearing the error again) if there is one.

        Returns:
            The collection held by the store afterwards
        """
        self.store.dispatch(set_loading, True)
        try:
            restaurants = await self._fetch_first_available()
            if restaurants is not None:
                self.store.dispatch(set_restaurants, restaurants)
                self.store.dispatch(clear_error)
                return self.store.state.restaurants

            logger.error("All API endpoints failed")
            self.store.dispatch(set_error, LOAD_ERROR_MESSAGE)

            cached = self.store.cache.load()
            if cached is not None:
                logger.info(f"Using {len(cached)} cached restaurants")
                self.store.dispatch(set_restaurants, cached)
                self.store.dispatch(clear_error)

            return self.store.state.restaurants
        finally:
            self.store.dispatch(set_loading, False)
