"""Services talking to the restaurants API."""

from restaurant_wall.services.api_client import RestaurantApiClient, RestaurantApiError
from restaurant_wall.services.retrieval_service import (
    FALLBACK_API_URL,
    LOAD_ERROR_MESSAGE,
    RetrievalService,
)
from restaurant_wall.services.submission_service import (
    SUBMIT_ERROR_MESSAGE,
    SubmissionService,
)

__all__ = [
    "FALLBACK_API_URL",
    "LOAD_ERROR_MESSAGE",
    "SUBMIT_ERROR_MESSAGE",
    "RestaurantApiClient",
    "RestaurantApiError",
    "RetrievalService",
    "SubmissionService",
]
