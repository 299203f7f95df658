import logging
from typing import Any, Dict, List, Optional

from google.api_core.exceptions import GoogleAPIError
from google.cloud.firestore import SERVER_TIMESTAMP, AsyncClient
from google.cloud.firestore_v1.base_query import FieldFilter

from app.core.exceptions import StoreError

logger = logging.getLogger(__name__)

EXERCISE_CLASSES = "exerciseClasses"
EXERCISES = "exercises"
WORKOUTS = "workouts"
SESSIONS = "sessions"


def doc_to_dict(snapshot) -> Dict[str, Any]:
    return {"id": snapshot.id, **(snapshot.to_dict() or {})}


class DocumentStore:
    """Acesso às coleções do Firestore, sempre dentro do tenant informado.

    Cada operação recebe o `user_id` explicitamente: um documento de outro
    usuário se comporta como inexistente.
    """

    def __init__(self, db: AsyncClient):
        self.db = db

    def _store_error(self, action: str, collection: str, e: GoogleAPIError) -> StoreError:
        logger.error(f"Firestore falhou ao {action} em {collection}: {e}")
        return StoreError(str(e))

    async def get(self, collection: str, doc_id: str, user_id: str) -> Optional[Dict[str, Any]]:
        if not doc_id:
            return None
        try:
            ref = self.db.collection(collection).document(doc_id)
        except ValueError:
            # id com "/" ou vazio não aponta para um documento
            return None
        try:
            snapshot = await ref.get()
        except GoogleAPIError as e:
            raise self._store_error("ler", collection, e)

        if not snapshot.exists:
            return None
        data = doc_to_dict(snapshot)
        if data.get("userId") != user_id:
            return None
        return data

    async def exists(self, collection: str, doc_id: str, user_id: str) -> bool:
        return await self.get(collection, doc_id, user_id) is not None

    async def create(self, collection: str, data: Dict[str, Any], user_id: str) -> Dict[str, Any]:
        """Grava o documento com userId e createdAt do servidor e relê o resultado."""
        payload = {**data, "userId": user_id, "createdAt": SERVER_TIMESTAMP}
        try:
            _, ref = await self.db.collection(collection).add(payload)
            snapshot = await ref.get()
        except GoogleAPIError as e:
            raise self._store_error("criar", collection, e)
        return doc_to_dict(snapshot)

    async def list_for_user(self, collection: str, user_id: str) -> List[Dict[str, Any]]:
        query = self.db.collection(collection).where(filter=FieldFilter("userId", "==", user_id))
        try:
            return [doc_to_dict(snapshot) async for snapshot in query.stream()]
        except GoogleAPIError as e:
            raise self._store_error("listar", collection, e)

    async def merge(
        self,
        collection: str,
        doc_id: str,
        data: Dict[str, Any],
        user_id: str,
    ) -> Optional[Dict[str, Any]]:
        """Merge-write parcial. Retorna None se o documento não existe no tenant."""
        if not await self.exists(collection, doc_id, user_id):
            return None

        ref = self.db.collection(collection).document(doc_id)
        try:
            await ref.set(data, merge=True)
            snapshot = await ref.get()
        except GoogleAPIError as e:
            raise self._store_error("atualizar", collection, e)
        return doc_to_dict(snapshot)

    async def delete(self, collection: str, doc_id: str, user_id: str) -> None:
        if not await self.exists(collection, doc_id, user_id):
            return
        try:
            await self.db.collection(collection).document(doc_id).delete()
        except GoogleAPIError as e:
            raise self._store_error("remover", collection, e)
