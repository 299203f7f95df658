from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Response, status

from app.core.dependencies import get_document_store, get_user_id
from app.core.exceptions import NotFoundError
from app.repositories.document_store import WORKOUTS, DocumentStore
from app.schemas.common import parse_payload
from app.schemas.workout import WorkoutCreate, WorkoutUpdate
from app.services.expansion import expand_workout_plan
from app.services.normalizer import normalize_workout_body
from app.services.ordering import newest_first
from app.services.reference_validator import validate_exercise_ids

router = APIRouter(prefix="/workouts", tags=["workouts"])


# ==========================
# ENDPOINTS
# ==========================

@router.post("", status_code=status.HTTP_201_CREATED)
async def create_workout(
    body: Dict[str, Any] = Body(...),
    user_id: str = Depends(get_user_id),
    store: DocumentStore = Depends(get_document_store),
):
    """Cria um treino a partir de `plan[]` ou do formato antigo `exerciseIds[]`."""
    payload = parse_payload(WorkoutCreate, normalize_workout_body(body))

    await validate_exercise_ids(store, [item.exercise_id for item in payload.plan], user_id)

    return await store.create(WORKOUTS, payload.to_document(), user_id)


@router.get("")
async def list_workouts(
    user_id: str = Depends(get_user_id),
    store: DocumentStore = Depends(get_document_store),
):
    return newest_first(await store.list_for_user(WORKOUTS, user_id))


@router.get("/{workout_id}")
async def get_workout(
    workout_id: str,
    expand: Optional[str] = None,
    user_id: str = Depends(get_user_id),
    store: DocumentStore = Depends(get_document_store),
):
    """`?expand=exercises` popula os exercícios de cada item do plan."""
    workout = await store.get(WORKOUTS, workout_id, user_id)
    if workout is None:
        raise NotFoundError("Workout not found")

    if expand == "exercises":
        workout = await expand_workout_plan(store, workout, user_id)
    return workout


@router.patch("/{workout_id}")
async def update_workout(
    workout_id: str,
    body: Dict[str, Any] = Body(...),
    user_id: str = Depends(get_user_id),
    store: DocumentStore = Depends(get_document_store),
):
    if not await store.exists(WORKOUTS, workout_id, user_id):
        raise NotFoundError("Workout not found")

    payload = parse_payload(WorkoutUpdate, normalize_workout_body(body))

    # Só revalida os exercícios quando o plan é substituído
    if payload.plan is not None:
        await validate_exercise_ids(store, [item.exercise_id for item in payload.plan], user_id)

    updated = await store.merge(WORKOUTS, workout_id, payload.to_document(), user_id)
    if updated is None:
        raise NotFoundError("Workout not found")
    return updated


@router.delete("/{workout_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_workout(
    workout_id: str,
    user_id: str = Depends(get_user_id),
    store: DocumentStore = Depends(get_document_store),
):
    await store.delete(WORKOUTS, workout_id, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
