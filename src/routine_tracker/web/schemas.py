"""Request bodies accepted by the API.

Field names follow the JSON the clients send (camelCase); the Python
attributes are snake_case.
"""

from pydantic import BaseModel, ConfigDict, Field

from ..db.engine import SQLITE_MAX_INTEGER


class RequestBody(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class RoutineCreate(RequestBody):
    description: str
    is_completed: bool | None = Field(default=None, alias="isCompleted")


class RoutineUpdate(RequestBody):
    is_completed: bool = Field(alias="isCompleted")


class ExerciseCreate(RequestBody):
    name: str
    muscle: str


class RoutineExerciseCreate(RequestBody):
    repetitions: int = Field(le=SQLITE_MAX_INTEGER)
    weight: float
    weight_measure: str = Field(alias="weightMeasure")
