"""Shared fixtures for payload tests.

The sample values mirror what a service layer typically hands back: a
record as input, an entity as output, field-keyed validation messages.
"""

from __future__ import annotations

from typing import Any

import pytest
from domain_payload import Payload, PayloadFactory


@pytest.fixture
def payload() -> Payload:
    return Payload()


@pytest.fixture
def factory() -> PayloadFactory:
    return PayloadFactory()


@pytest.fixture
def article() -> dict[str, Any]:
    return {"id": 1, "title": "Community meeting recap", "tags": ["civic", "budget"]}


@pytest.fixture
def validation_messages() -> dict[str, list[str]]:
    return {
        "title": ["Title cannot be blank."],
        "body": ["Body is too short.", "Body contains a banned word."],
    }
