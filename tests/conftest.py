from __future__ import annotations

import json

import pytest


@pytest.fixture
def users_document() -> str:
    return json.dumps({
        "users": [
            {"name": "Ann", "age": 31, "tags": ["admin", "ops"]},
            {"name": "Bob", "age": 27, "tags": []},
            {"name": "Cy", "age": 45, "active": True, "manager": None},
        ],
        "meta": {"version": 3, "source": "export"},
    }, indent=2)
