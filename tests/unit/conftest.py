"""Shared fixtures: real compendium payloads and a fake HTTP layer."""
import json
from typing import Dict, Tuple, Union
from unittest.mock import patch

import pytest
import requests

from hyrule_compendium.adapters.compendium.client import CompendiumAPIClient
from hyrule_compendium.adapters.compendium.compendium import CompendiumAPI
from hyrule_compendium.settings import CompendiumSettings

BASE_URL = "http://compendium.test/api/v2/"

SILVER_MOBLIN = {
    "category": "monsters",
    "common_locations": None,
    "description": "The strongest of all Moblins, Ganon's fiendish magic has allowed them to surpass "
                   "even the Black Moblins in strength and resilience.",
    "drops": ["moblin horn", "moblin fang", "moblin guts", "amber", "opal", "topaz", "ruby",
              "sapphire", "diamond"],
    "id": 112,
    "image": "https://botw-compendium.herokuapp.com/api/v2/entry/silver_moblin/image",
    "name": "silver moblin",
}

WINTERWING_BUTTERFLY = {
    "category": "creatures",
    "common_locations": ["Hyrule Ridge", "Tabantha Frontier"],
    "cooking_effect": "heat resistance",
    "description": "The powdery scales of this butterfly's wings cool the air around it.",
    "hearts_recovered": 0,
    "id": 67,
    "image": "https://botw-compendium.herokuapp.com/api/v2/entry/winterwing_butterfly/image",
    "name": "winterwing butterfly",
}

HORSE = {
    "category": "creatures",
    "common_locations": ["Hyrule Field", "Gerudo Highlands"],
    "description": "These can most often be found on plains.",
    "drops": [],
    "id": 1,
    "image": "https://botw-compendium.herokuapp.com/api/v2/entry/horse/image",
    "name": "horse",
}

MASTER_SWORD = {
    "attack": 30,
    "category": "equipment",
    "common_locations": None,
    "defense": 0,
    "description": "The legendary sword that seals the darkness.",
    "id": 348,
    "image": "https://botw-compendium.herokuapp.com/api/v2/entry/master_sword/image",
    "name": "master sword",
}

HYRULE_BASS = {
    "category": "materials",
    "common_locations": ["West Necluda", "Lanayru Great Spring"],
    "cooking_effect": "",
    "description": "This fish is found throughout Hyrule.",
    "hearts_recovered": 1.0,
    "id": 177,
    "image": "https://botw-compendium.herokuapp.com/api/v2/entry/hyrule_bass/image",
    "name": "hyrule bass",
}

TREASURE_CHEST = {
    "category": "treasure",
    "common_locations": ["Lanayru Great Spring"],
    "description": "A chest guarded by a hinox.",
    "drops": ["rupee"],
    "id": 385,
    "image": "https://botw-compendium.herokuapp.com/api/v2/entry/treasure_chest/image",
    "name": "treasure chest",
}

MISSING_DATA = {"data": {}, "message": "no results"}

Body = Union[dict, list, str, bytes]


def make_response(status: int, body: Body, url: str) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status
    resp.url = url
    if isinstance(body, (dict, list)):
        body = json.dumps(body)
    resp._content = body.encode("utf-8") if isinstance(body, str) else body
    resp.headers["Content-Type"] = "application/json"
    return resp


class FakeServer:
    """Maps request urls to canned (status, body) pairs and records calls."""

    def __init__(self):
        self.routes: Dict[str, Tuple[int, Body]] = {}
        self.requested = []

    def add(self, path: str, body: Body, status: int = 200) -> None:
        self.routes[BASE_URL + path] = (status, body)

    def get(self, url, params=None, timeout=None, verify=None):
        self.requested.append(url)
        status, body = self.routes.get(url, (404, MISSING_DATA))
        return make_response(status, body, url)


@pytest.fixture
def settings():
    return CompendiumSettings(base_url=BASE_URL, timeout=5, total_retries=0)


@pytest.fixture
def server():
    return FakeServer()


@pytest.fixture
def client(settings, server):
    api_client = CompendiumAPIClient(settings=settings)
    with patch.object(api_client.session, "get", side_effect=server.get):
        yield api_client


@pytest.fixture
def compendium(client):
    return CompendiumAPI(client)
