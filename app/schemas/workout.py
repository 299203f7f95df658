from typing import List, Optional

from pydantic import Field, StrictFloat, StrictInt

from app.schemas.common import CamelModel, PartialModel


class WorkoutItem(CamelModel):
    exercise_id: str
    series: StrictInt = Field(gt=0)
    load: Optional[StrictFloat] = Field(default=None, ge=0)
    target_reps: Optional[StrictInt] = Field(default=None, gt=0)


class WorkoutCreate(CamelModel):
    name: str = Field(min_length=2)
    notes: Optional[str] = None
    plan: List[WorkoutItem] = Field(min_length=1)


class WorkoutUpdate(PartialModel):
    name: Optional[str] = Field(default=None, min_length=2)
    notes: Optional[str] = None
    # No PATCH um plan vazio é aceito
    plan: Optional[List[WorkoutItem]] = None
