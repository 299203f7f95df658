import asyncio
from typing import Awaitable, Callable, Optional, Sequence

from app.core.exceptions import MissingReferenceError
from app.repositories.document_store import EXERCISE_CLASSES, EXERCISES, DocumentStore

Lookup = Callable[[str], Awaitable[bool]]


async def validate_references(
    ids: Sequence[str],
    lookup: Lookup,
    message: Optional[Callable[[list], str]] = None,
) -> None:
    """Checa em paralelo se cada id existe; falha com todos os ausentes.

    Não há deduplicação: ids repetidos são consultados de novo. A ordem dos
    ids ausentes segue a ordem de entrada.
    """
    found = await asyncio.gather(*(lookup(ref_id) for ref_id in ids))
    missing = [ref_id for ref_id, exists in zip(ids, found) if not exists]
    if missing:
        text = message(missing) if message else f"ids inexistentes: {', '.join(missing)}"
        raise MissingReferenceError(missing, text)


async def validate_exercise_ids(store: DocumentStore, ids: Sequence[str], user_id: str) -> None:
    await validate_references(
        ids,
        lambda exercise_id: store.exists(EXERCISES, exercise_id, user_id),
        lambda missing: f"exerciseIds inexistentes: {', '.join(missing)}",
    )


async def validate_class_id(store: DocumentStore, class_id: str, user_id: str) -> None:
    await validate_references(
        [class_id],
        lambda ref_id: store.exists(EXERCISE_CLASSES, ref_id, user_id),
        lambda missing: "classId inexistente",
    )
