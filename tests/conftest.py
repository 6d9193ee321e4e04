"""Shared fixtures for smogon-scraper tests."""

import html as html_lib
import json
from datetime import datetime, timezone

import pytest
import requests


@pytest.fixture
def session():
    return requests.Session()


@pytest.fixture
def fixed_clock():
    """Clock that always returns the same instant."""
    moment = datetime(2024, 5, 1, 12, 30, 45, 123000, tzinfo=timezone.utc)
    return lambda: moment


# --- Mock CMS payloads ---

@pytest.fixture
def credits_payload():
    """Realistic decoded react-data payload for a user with four credits."""
    return {
        "credits": [
            {
                "format_id": "sv/OU",
                "pokemon_id": "sv/Chinchou",
                "language": "en",
                "credit_type": "Written by",
                "set_order": 1,
                "credit_order": 1,
                "gen_order": 9,
            },
            {
                "format_id": "sv/LC",
                "pokemon_id": "sv/Diglett-Alola",
                "language": "en",
                "credit_type": "Quality checked by",
                "set_order": 2,
                "credit_order": 1,
                "gen_order": 9,
            },
            {
                "format_id": "ss/OU",
                "pokemon_id": "ss/Chinchou",
                "language": "en",
                "credit_type": "Written by",
                "set_order": 1,
                "credit_order": 2,
                "gen_order": 8,
            },
            {
                "format_id": "sv/OU",
                "pokemon_id": "sv/Chinchou",
                "language": "es",
                "credit_type": "Grammar checked by",
                "set_order": 1,
                "credit_order": 3,
                "gen_order": 9,
            },
        ]
    }


def make_page(payload, username="Finchinator"):
    """Render a CMS page the way the server does: payload escaped into react-data."""
    escaped = html_lib.escape(json.dumps(payload), quote=True).replace("&#x27;", "'")
    member = (
        f'<a href="/forums/members/{username.lower()}.641532/" class="username">{username}</a>'
        if username else ""
    )
    return (
        "<!DOCTYPE html><html><head><title>Smogon CMS</title></head><body>"
        f'<div class="header">{member}</div>'
        f'<div id="root" react-data="{escaped}"></div>'
        "</body></html>"
    )


@pytest.fixture
def cms_page(credits_payload):
    return make_page(credits_payload)


@pytest.fixture
def page_factory():
    return make_page
