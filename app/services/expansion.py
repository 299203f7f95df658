"""
Expansão de referências na leitura (`?expand=...`).

Os ids referenciados são deduplicados, buscados em paralelo e recolocados
em cada item original: ordem e repetições da lista são mantidas, e uma
referência que não existe mais vira `None` sem derrubar a requisição.
"""

import asyncio
from typing import Any, Awaitable, Callable, Dict, List, Optional, Sequence, TypeVar

from app.repositories.document_store import EXERCISE_CLASSES, EXERCISES, DocumentStore

Document = Dict[str, Any]
Parent = TypeVar("Parent")


async def expand(
    parent: Parent,
    extract_ids: Callable[[Parent], Sequence[str]],
    lookup: Callable[[str], Awaitable[Optional[Document]]],
    splice: Callable[[Parent, Dict[str, Optional[Document]]], Parent],
) -> Parent:
    unique_ids = list(dict.fromkeys(extract_ids(parent)))
    documents = await asyncio.gather(*(lookup(ref_id) for ref_id in unique_ids))
    resolved = dict(zip(unique_ids, documents))
    return splice(parent, resolved)


async def expand_workout_plan(store: DocumentStore, workout: Document, user_id: str) -> Document:
    """Anexa `exercise` a cada item do plan."""
    plan = workout.get("plan")
    if not isinstance(plan, list) or not plan:
        return workout

    def splice(parent: Document, resolved: Dict[str, Optional[Document]]) -> Document:
        return {
            **parent,
            "plan": [
                {**item, "exercise": resolved.get(item.get("exerciseId"))}
                for item in parent["plan"]
            ],
        }

    return await expand(
        workout,
        lambda parent: [item.get("exerciseId") for item in parent["plan"]],
        lambda exercise_id: store.get(EXERCISES, exercise_id, user_id),
        splice,
    )


async def expand_exercise_classes(
    store: DocumentStore,
    exercises: List[Document],
    user_id: str,
) -> List[Document]:
    """Anexa `class` a cada exercício da lista."""
    if not exercises:
        return exercises

    def splice(items: List[Document], resolved: Dict[str, Optional[Document]]) -> List[Document]:
        return [{**item, "class": resolved.get(item.get("classId"))} for item in items]

    return await expand(
        exercises,
        lambda items: [item["classId"] for item in items if item.get("classId")],
        lambda class_id: store.get(EXERCISE_CLASSES, class_id, user_id),
        splice,
    )
