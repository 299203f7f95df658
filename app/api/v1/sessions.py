from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status

from app.core.dependencies import get_document_store, get_user_id
from app.core.exceptions import NotFoundError
from app.repositories.document_store import SESSIONS, DocumentStore
from app.schemas.session import SessionCreate, SessionUpdate
from app.services.dates import parse_datetime
from app.services.ordering import latest_date_first

router = APIRouter(prefix="/sessions", tags=["sessions"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_session(
    payload: SessionCreate,
    user_id: str = Depends(get_user_id),
    store: DocumentStore = Depends(get_document_store),
):
    return await store.create(SESSIONS, payload.to_document(), user_id)


@router.get("")
async def list_sessions(
    date_from: Optional[str] = Query(default=None, alias="from"),
    date_to: Optional[str] = Query(default=None, alias="to"),
    user_id: str = Depends(get_user_id),
    store: DocumentStore = Depends(get_document_store),
):
    """Sessões do usuário, mais recentes primeiro.

    Limites `from`/`to` inválidos são ignorados; sessões sem data legível
    nunca são filtradas.
    """
    lower = parse_datetime(date_from)
    upper = parse_datetime(date_to)

    filtered = []
    for session in await store.list_for_user(SESSIONS, user_id):
        current = parse_datetime(session.get("date"))
        if current is not None:
            if lower and current < lower:
                continue
            if upper and current > upper:
                continue
        filtered.append(session)

    return latest_date_first(filtered)


@router.patch("/{session_id}")
async def update_session(
    session_id: str,
    payload: SessionUpdate,
    user_id: str = Depends(get_user_id),
    store: DocumentStore = Depends(get_document_store),
):
    updated = await store.merge(SESSIONS, session_id, payload.to_document(), user_id)
    if updated is None:
        raise NotFoundError("Session not found")
    return updated


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_session(
    session_id: str,
    user_id: str = Depends(get_user_id),
    store: DocumentStore = Depends(get_document_store),
):
    await store.delete(SESSIONS, session_id, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
