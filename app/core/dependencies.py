from typing import Optional

from fastapi import Depends, Header
from google.cloud.firestore import AsyncClient

from app.core.config import settings
from app.core.db import get_db
from app.core.exceptions import UnauthorizedError
from app.repositories.document_store import DocumentStore


def get_document_store(db: AsyncClient = Depends(get_db)) -> DocumentStore:
    """Fábrica do store, injetada nos endpoints via Depends."""
    return DocumentStore(db)


def get_user_id(x_user_id: Optional[str] = Header(default=None)) -> str:
    """Tenant da requisição: header X-User-Id ou o usuário padrão."""
    return x_user_id or settings.DEFAULT_USER_ID


async def verify_api_key(x_api_key: Optional[str] = Header(default=None)) -> None:
    required_key = settings.API_KEY
    if not required_key:
        return
    if x_api_key != required_key:
        raise UnauthorizedError()
