from typing import Optional

from fastapi import APIRouter, Depends, Response, status

from app.core.dependencies import get_document_store, get_user_id
from app.core.exceptions import NotFoundError
from app.repositories.document_store import EXERCISES, DocumentStore
from app.schemas.exercise import ExerciseCreate, ExerciseUpdate
from app.services.expansion import expand_exercise_classes
from app.services.ordering import newest_first
from app.services.reference_validator import validate_class_id

router = APIRouter(prefix="/exercises", tags=["exercises"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_exercise(
    payload: ExerciseCreate,
    user_id: str = Depends(get_user_id),
    store: DocumentStore = Depends(get_document_store),
):
    await validate_class_id(store, payload.class_id, user_id)
    return await store.create(EXERCISES, payload.to_document(), user_id)


@router.get("")
async def list_exercises(
    expand: Optional[str] = None,
    user_id: str = Depends(get_user_id),
    store: DocumentStore = Depends(get_document_store),
):
    """Lista os exercícios do usuário; `?expand=class` anexa a classe de cada um."""
    exercises = newest_first(await store.list_for_user(EXERCISES, user_id))
    if expand == "class":
        exercises = await expand_exercise_classes(store, exercises, user_id)
    return exercises


@router.patch("/{exercise_id}")
async def update_exercise(
    exercise_id: str,
    payload: ExerciseUpdate,
    user_id: str = Depends(get_user_id),
    store: DocumentStore = Depends(get_document_store),
):
    # classId é validado antes de procurar o exercício
    if payload.class_id:
        await validate_class_id(store, payload.class_id, user_id)

    updated = await store.merge(EXERCISES, exercise_id, payload.to_document(), user_id)
    if updated is None:
        raise NotFoundError("Exercise not found")
    return updated


@router.delete("/{exercise_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_exercise(
    exercise_id: str,
    user_id: str = Depends(get_user_id),
    store: DocumentStore = Depends(get_document_store),
):
    await store.delete(EXERCISES, exercise_id, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
