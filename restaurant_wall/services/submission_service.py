"""Submission service - adds new restaurant recommendations."""

import logging
import time
import uuid

import httpx

from restaurant_wall.config import Config, get_config
from restaurant_wall.models import Restaurant, RestaurantDraft
from restaurant_wall.services.api_client import RestaurantApiClient, RestaurantApiError
from restaurant_wall.services.retrieval_service import RetrievalService
from restaurant_wall.store import AppStore, clear_error, set_error

logger = logging.getLogger(__name__)

SUBMIT_ERROR_MESSAGE = "Failed to add restaurant. Please try again."


class SubmissionService:
    """Turns drafts into restaurants and posts them to the API.

    Nothing is added to the store directly; after a successful post the
    collection is reloaded through the retrieval service.
    """

    def __init__(
        self,
        store: AppStore,
        retrieval: RetrievalService,
        config: Config | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the submission service.

        Args:
            store: Application store (for current ids and the error message)
            retrieval: Service used to reload after a successful post
            config: Configuration (defaults to the global config)
            transport: Optional httpx transport (used by tests)
        """
        self.config = config or get_config()
        self.store = store
        self.retrieval = retrieval
        self.client = RestaurantApiClient(self.config.api_url, transport=transport)
        self._last_timestamp = 0

    @staticmethod
    def generate_id() -> str:
        """Generate a unique restaurant identifier.

        Returns:
            UUID-based restaurant ID
        """
        return str(uuid.uuid4())

    def _next_timestamp(self) -> int:
        now = int(time.time() * 1000)
        # Never go backwards, even if the wall clock does
        self._last_timestamp = max(now, self._last_timestamp)
        return self._last_timestamp

    def create_record(self, draft: RestaurantDraft) -> Restaurant:
        """Assign an id and creation time to a draft.

        Args:
            draft: Restaurant details entered by the user

        Returns:
            Complete restaurant record
        """
        existing_ids = {r.id for r in self.store.state.restaurants}
        restaurant_id = self.generate_id()
        while restaurant_id in existing_ids:
            restaurant_id = self.generate_id()

        return Restaurant(
            **draft.model_dump(exclude={"id", "timestamp"}),
            id=restaurant_id,
            timestamp=self._next_timestamp(),
        )

    async def submit(self, draft: RestaurantDraft) -> bool:
        """Submit a new recommendation.

        Args:
            draft: Restaurant details entered by the user

        Returns:
            True if the API accepted it, False otherwise
        """
        restaurant = self.create_record(draft)
        logger.info(f"Submitting restaurant: {restaurant.name}")

        try:
            await self.client.create_restaurant(restaurant)
        except RestaurantApiError:
            logger.exception("Error adding restaurant")
            self.store.dispatch(set_error, SUBMIT_ERROR_MESSAGE)
            return False

        await self.retrieval.refresh()
        self.store.dispatch(clear_error)
        return True
