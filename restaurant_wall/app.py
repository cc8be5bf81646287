"""Restaurant Wall application - wires storage, state and services together."""

import logging

import httpx

from restaurant_wall.config import Config, get_config
from restaurant_wall.models import AppState, Restaurant, RestaurantDraft
from restaurant_wall.services import RetrievalService, SubmissionService
from restaurant_wall.storage import LocalStorage, RestaurantCache
from restaurant_wall.store import AppStore, Transition, visible_restaurants

logger = logging.getLogger(__name__)


class RestaurantWall:
    """Entry point for a front end.

    Front ends read ``state`` and ``visible()``, call ``update()`` with a
    transition for user input, and ``load()``/``add()`` for network actions.
    """

    def __init__(
        self,
        config: Config | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the application.

        Args:
            config: Configuration (defaults to the global config)
            transport: Optional httpx transport (used by tests)
        """
        self.config = config or get_config()
        self.storage = LocalStorage(self.config.storage_path)
        self.store = AppStore(RestaurantCache(self.storage))
        self.retrieval = RetrievalService(self.store, self.config, transport=transport)
        self.submission = SubmissionService(
            self.store, self.retrieval, self.config, transport=transport
        )
        logger.info(f"Restaurant Wall using API at {self.config.api_url}")

    @property
    def state(self) -> AppState:
        return self.store.state

    def update(self, transition: Transition, *args) -> AppState:
        """Apply a state transition (filters, sort, selection, view mode)."""
        return self.store.dispatch(transition, *args)

    def visible(self) -> list[Restaurant]:
        """Restaurants after filtering and sorting."""
        return visible_restaurants(self.store.state)

    async def load(self) -> tuple[Restaurant, ...]:
        """Fetch restaurants through the fallback chain."""
        return await self.retrieval.refresh()

    async def add(self, draft: RestaurantDraft) -> bool:
        """Submit a new recommendation and reload on success."""
        return await self.submission.submit(draft)
