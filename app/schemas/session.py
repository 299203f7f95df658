from typing import List, Optional

from pydantic import Field, StrictFloat, StrictInt, field_validator

from app.schemas.common import CamelModel, PartialModel
from app.services.dates import parse_datetime, to_iso_utc


class SetEntry(CamelModel):
    weight: StrictFloat = Field(ge=0)
    reps: StrictInt = Field(gt=0)


class SessionEntry(CamelModel):
    # exerciseId não é checado contra a coleção de exercícios
    exercise_id: str
    name: Optional[str] = None
    sets: List[SetEntry] = Field(min_length=1)


def normalize_session_date(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    parsed = parse_datetime(value)
    if parsed is None:
        raise ValueError(f"data inválida: {value}")
    return to_iso_utc(parsed)


class SessionCreate(CamelModel):
    date: str
    workout_id: Optional[str] = None
    custom_name: Optional[str] = None
    entries: List[SessionEntry] = Field(min_length=1)

    @field_validator("date")
    @classmethod
    def normalize_date(cls, value: Optional[str]) -> Optional[str]:
        return normalize_session_date(value)


class SessionUpdate(PartialModel):
    date: Optional[str] = None
    workout_id: Optional[str] = None
    custom_name: Optional[str] = None
    entries: Optional[List[SessionEntry]] = Field(default=None, min_length=1)

    @field_validator("date")
    @classmethod
    def normalize_date(cls, value: Optional[str]) -> Optional[str]:
        return normalize_session_date(value)
