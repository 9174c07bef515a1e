from __future__ import annotations

import httpx
import pytest
import pytest_asyncio

from kcadmin import KeycloakAdminClient
from tests.fake_keycloak import BASE_URL, TOKEN, FakeKeycloak


@pytest.fixture
def fake() -> FakeKeycloak:
    return FakeKeycloak()


@pytest_asyncio.fixture
async def client(fake: FakeKeycloak):
    async with KeycloakAdminClient(BASE_URL, TOKEN, transport=httpx.MockTransport(fake.handler)) as kc:
        yield kc
