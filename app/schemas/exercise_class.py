from typing import Optional

from pydantic import Field

from app.schemas.common import CamelModel, PartialModel


class ExerciseClassCreate(CamelModel):
    name: str = Field(min_length=2)
    description: Optional[str] = None


class ExerciseClassUpdate(PartialModel):
    name: Optional[str] = Field(default=None, min_length=2)
    description: Optional[str] = None
