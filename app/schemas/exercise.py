from typing import Optional

from pydantic import Field

from app.schemas.common import CamelModel, PartialModel


class ExerciseCreate(CamelModel):
    name: str = Field(min_length=2)
    class_id: str = Field(min_length=1)
    muscle_group: Optional[str] = Field(default=None, min_length=2)


class ExerciseUpdate(PartialModel):
    name: Optional[str] = Field(default=None, min_length=2)
    class_id: Optional[str] = Field(default=None, min_length=1)
    muscle_group: Optional[str] = Field(default=None, min_length=2)
