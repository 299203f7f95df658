from fastapi import Request
from google.cloud.firestore import AsyncClient


def get_db(request: Request) -> AsyncClient:
    """Cliente Firestore criado no startup e guardado em app.state."""
    return request.app.state.db
