from fastapi import APIRouter, Depends, Response, status

from app.core.dependencies import get_document_store, get_user_id
from app.core.exceptions import NotFoundError
from app.repositories.document_store import EXERCISE_CLASSES, DocumentStore
from app.schemas.exercise_class import ExerciseClassCreate, ExerciseClassUpdate
from app.services.ordering import newest_first

router = APIRouter(prefix="/exercise-classes", tags=["exercise-classes"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_exercise_class(
    payload: ExerciseClassCreate,
    user_id: str = Depends(get_user_id),
    store: DocumentStore = Depends(get_document_store),
):
    return await store.create(EXERCISE_CLASSES, payload.to_document(), user_id)


@router.get("")
async def list_exercise_classes(
    user_id: str = Depends(get_user_id),
    store: DocumentStore = Depends(get_document_store),
):
    classes = await store.list_for_user(EXERCISE_CLASSES, user_id)
    return newest_first(classes)


@router.patch("/{class_id}")
async def update_exercise_class(
    class_id: str,
    payload: ExerciseClassUpdate,
    user_id: str = Depends(get_user_id),
    store: DocumentStore = Depends(get_document_store),
):
    updated = await store.merge(EXERCISE_CLASSES, class_id, payload.to_document(), user_id)
    if updated is None:
        raise NotFoundError("Class not found")
    return updated


@router.delete("/{class_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_exercise_class(
    class_id: str,
    user_id: str = Depends(get_user_id),
    store: DocumentStore = Depends(get_document_store),
):
    await store.delete(EXERCISE_CLASSES, class_id, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
