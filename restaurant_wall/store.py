"""Application state transitions and the store that applies them."""

import logging
from collections.abc import Callable, Iterable

from restaurant_wall.models import AppState, Restaurant, ViewMode
from restaurant_wall.pipeline import filter_and_sort
from restaurant_wall.storage import RestaurantCache, StorageError

logger = logging.getLogger(__name__)

Transition = Callable[..., AppState]


def set_restaurants(state: AppState, restaurants: Iterable[Restaurant]) -> AppState:
    """Replace the collection."""
    return state.model_copy(update={"restaurants": tuple(restaurants)})


def set_loading(state: AppState, is_loading: bool) -> AppState:
    return state.model_copy(update={"is_loading": is_loading})


def set_error(state: AppState, message: str) -> AppState:
    """Show a message, replacing any previous one."""
    return state.model_copy(update={"error": message})


def clear_error(state: AppState) -> AppState:
    return state.model_copy(update={"error": None})


def set_search_term(state: AppState, search_term: str) -> AppState:
    return state.model_copy(update={"search_term": search_term})


def set_cuisine_filter(state: AppState, cuisine: str) -> AppState:
    return state.model_copy(update={"selected_cuisine": cuisine})


def set_price_filter(state: AppState, price_filter: str) -> AppState:
    return state.model_copy(update={"price_filter": price_filter})


def set_sort(state: AppState, sort_by: str) -> AppState:
    return state.model_copy(update={"sort_by": sort_by})


def select_restaurant(state: AppState, restaurant_id: str | None) -> AppState:
    """Highlight a restaurant in both the list and the map."""
    return state.model_copy(update={"selected_restaurant": restaurant_id})


def set_view_mode(state: AppState, view_mode: ViewMode) -> AppState:
    return state.model_copy(update={"view_mode": ViewMode(view_mode)})


def visible_restaurants(state: AppState) -> list[Restaurant]:
    """Run the filter/sort pipeline over the current state."""
    return filter_and_sort(
        state.restaurants,
        state.search_term,
        state.selected_cuisine,
        state.price_filter,
        state.sort_by,
    )


class AppStore:
    """Holds the current AppState.

    Every change to the restaurant collection is written to the cache.
    """

    def __init__(self, cache: RestaurantCache, state: AppState | None = None) -> None:
        """Initialize the store.

        Args:
            cache: Where the collection is mirrored after every change
            state: Starting state (defaults to an empty, loading state)
        """
        self.cache = cache
        self._state = state if state is not None else AppState()

    @property
    def state(self) -> AppState:
        return self._state

    def dispatch(self, transition: Transition, *args) -> AppState:
        """Apply a transition and return the new state.

        Args:
            transition: Pure function taking the current state (plus args)
            *args: Extra arguments passed to the transition

        Returns:
            The new state
        """
        previous = self._state
        self._state = transition(previous, *args)

        if self._state.restaurants is not previous.restaurants:
            self._persist()

        return self._state

    def _persist(self) -> None:
        try:
            self.cache.save(self._state.restaurants)
        except StorageError:
            logger.exception("Failed to save restaurants to local storage")
        else:
            logger.debug(f"Saved {len(self._state.restaurants)} restaurants to cache")
