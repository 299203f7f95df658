"""
Fixtures comuns dos testes da Onemorerep API.

Estratégia:
- O app FastAPI de teste é criado sem eventos de startup (sem Firebase).
- get_db é substituído por FakeFirestore: DocumentStore, validadores e
  expansão reais rodam sobre coleções em memória.
- X-User-Id escolhe o tenant; API_KEY é ligado por teste via monkeypatch.
"""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from typing import AsyncGenerator

from app.api.router import api_router, public_router
from app.core.config import settings
from app.core.db import get_db
from app.core.exceptions import register_exception_handlers
from app.repositories.document_store import DocumentStore
from tests.fakes import FakeFirestore

USER_ID = "user-1"
OTHER_USER_ID = "user-2"


# ---------------------------------------------------------------------------
# Funções auxiliares
# ---------------------------------------------------------------------------

def create_test_app() -> FastAPI:
    """App FastAPI de teste sem eventos de startup."""
    test_app = FastAPI(title="Onemorerep Test App")
    register_exception_handlers(test_app)
    test_app.include_router(public_router)
    test_app.include_router(api_router)
    return test_app


def user_headers(user_id: str = USER_ID) -> dict:
    return {"X-User-Id": user_id}


# ---------------------------------------------------------------------------
# Store fixtures
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def no_api_key(monkeypatch):
    """O X-API-Key fica desligado, a menos que o teste o ligue."""
    monkeypatch.setattr(settings, "API_KEY", None)


@pytest.fixture
def fake_db() -> FakeFirestore:
    return FakeFirestore()


@pytest.fixture
def store(fake_db) -> DocumentStore:
    return DocumentStore(fake_db)


# ---------------------------------------------------------------------------
# Cliente HTTP
# ---------------------------------------------------------------------------

@pytest.fixture
async def client(fake_db) -> AsyncGenerator[AsyncClient, None]:
    app = create_test_app()
    app.dependency_overrides[get_db] = lambda: fake_db
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        headers=user_headers(),
    ) as ac:
        yield ac
