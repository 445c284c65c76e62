"""
Shared fixtures: canned upstream records and HTTP responses, no network
"""

import copy
import json
from unittest.mock import Mock

import pytest
import requests

from user_directory.coreutils.config import APIConfig
from user_directory.extract.users_api import UsersAPIClient

LEANNE = {
    "id": 1,
    "name": "Leanne Graham",
    "username": "Bret",
    "email": "Sincere@april.biz",
    "address": {
        "street": "Kulas Light",
        "suite": "Apt. 556",
        "city": "Gwenborough",
        "zipcode": "92998-3874",
        "geo": {"lat": "-37.3159", "lng": "81.1496"},
    },
    "phone": "1-770-736-8031 x56442",
    "website": "hildegard.org",
    "company": {
        "name": "Romaguera-Crona",
        "catchPhrase": "Multi-layered client-server neural-net",
        "bs": "harness real-time e-markets",
    },
}

ERVIN = {
    "id": 2,
    "name": "Ervin Howell",
    "username": "Antonette",
    "email": "Shanna@melissa.tv",
    "address": {
        "street": "Victor Plains",
        "suite": "Suite 879",
        "city": "Wisokyburgh",
        "zipcode": "90566-7771",
        "geo": {"lat": "-43.9509", "lng": "-34.4618"},
    },
    "phone": "010-692-6593 x09125",
    "website": "anastasia.net",
    "company": {
        "name": "Deckow-Crist",
        "catchPhrase": "Proactive didactic contingency",
        "bs": "synergize scalable supply-chains",
    },
}

ANA = {
    "id": 3,
    "name": "Ana Lucia Diaz",
    "username": "Lucia.D",
    "email": "lucia@kory.org",
    "address": {
        "street": "Douglas Extension",
        "suite": "Suite 847",
        "city": "McKenziehaven",
        "zipcode": "59590-4157",
        "geo": {"lat": "-68.6102", "lng": "-47.0653"},
    },
    "phone": "1-463-123-4447",
    "website": "ramiro.info",
    "company": {
        "name": "Romaguera-Jacobson",
        "catchPhrase": "Face to face bifurcated interface",
        "bs": "e-enable strategic applications",
    },
}


@pytest.fixture
def raw_user():
    return copy.deepcopy(LEANNE)


@pytest.fixture
def raw_users():
    return [copy.deepcopy(LEANNE), copy.deepcopy(ERVIN), copy.deepcopy(ANA)]


def make_response(status_code=200, payload=None, body=None):
    """Build a real requests.Response without touching the network"""
    response = requests.Response()
    response.status_code = status_code
    if body is None:
        body = json.dumps(payload).encode("utf-8")
    response._content = body
    response._content_consumed = True
    response.encoding = "utf-8"
    return response


@pytest.fixture
def session():
    return Mock(spec=requests.Session)


@pytest.fixture
def config():
    return APIConfig(base_url="https://users.test")


@pytest.fixture
def client(config, session):
    return UsersAPIClient(config, session=session)
