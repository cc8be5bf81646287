"""Shared fixtures for Restaurant Wall tests."""

import itertools
import json

import httpx
import pytest

from restaurant_wall.config import Config
from restaurant_wall.models import Restaurant, RestaurantDraft

PRIMARY_URL = "http://primary.test/api"

_ids = itertools.count(1)


def draft_data(**overrides) -> dict:
    """Wire-format draft with sensible defaults."""
    data = {
        "name": "Tofu House",
        "cuisine": "Japanese",
        "description": "Silken tofu and miso ramen",
        "priceRange": "€€",
        "rating": 4,
        "recommendedBy": "Sam",
        "location": {"lat": 52.52, "lng": 13.405, "address": "1 Main St"},
    }
    data.update(overrides)
    return data


def make_draft(**overrides) -> RestaurantDraft:
    return RestaurantDraft.model_validate(draft_data(**overrides))


def make_restaurant(**overrides) -> Restaurant:
    data = draft_data()
    data["id"] = f"r-{next(_ids)}"
    data["timestamp"] = 1_700_000_000_000
    data.update(overrides)
    return Restaurant.model_validate(data)


class FakeApi:
    """In-memory restaurants API served through httpx.MockTransport."""

    def __init__(self, restaurants=None, failing_hosts=(), unreachable_hosts=()):
        self.restaurants = [r.to_payload() for r in restaurants or []]
        self.failing_hosts = set(failing_hosts)
        self.unreachable_hosts = set(unreachable_hosts)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.host in self.unreachable_hosts:
            msg = "connection refused"
            raise httpx.ConnectError(msg, request=request)
        if request.url.host in self.failing_hosts:
            return httpx.Response(503, json={"error": "unavailable"})
        if request.method == "POST":
            self.restaurants.append(json.loads(request.content))
            return httpx.Response(201)
        return httpx.Response(200, json=self.restaurants)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def config(tmp_path):
    """Configuration pointing at a fake API and a temporary storage file."""
    return Config(api_url=PRIMARY_URL, storage_path=str(tmp_path / "storage.db"))


@pytest.fixture(name="make_restaurant")
def make_restaurant_fixture():
    """Factory for complete restaurant records."""
    return make_restaurant


@pytest.fixture(name="make_draft")
def make_draft_fixture():
    """Factory for restaurant drafts."""
    return make_draft


@pytest.fixture(name="draft_data")
def draft_data_fixture():
    """Factory for wire-format draft dictionaries."""
    return draft_data


@pytest.fixture
def fake_api():
    """Factory for fake restaurants APIs."""
    return FakeApi
