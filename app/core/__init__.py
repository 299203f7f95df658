from app.core.config import settings
from app.core.db import get_db
from app.core.firebase import create_firestore_client, initialize_firebase

__all__ = ["settings", "get_db", "initialize_firebase", "create_firestore_client"]
