"""Request bodies accepted by the API."""

from pydantic import BaseModel, Field

from ..models.routine import RoutineExerciseSpec, RoutineSpec


class UserCreate(BaseModel):
    email: str = Field(min_length=3)
    name: str = Field(min_length=1)
    goal: str | None = None
    password_hash: str | None = None


class RoutineExerciseIn(BaseModel):
    exercise_id: int


class RoutineIn(BaseModel):
    """Routine body for create and full-replace update."""

    name: str = Field(min_length=1)
    description: str = ""
    exercises: list[RoutineExerciseIn] = Field(default_factory=list)

    def to_spec(self) -> RoutineSpec:
        return RoutineSpec(
            name=self.name,
            description=self.description,
            exercises=[RoutineExerciseSpec(exercise_id=e.exercise_id) for e in self.exercises],
        )


class RoutineExerciseAdd(BaseModel):
    exercise_id: int
    order: int = Field(ge=0)


class LikeIn(BaseModel):
    user_id: int
    exercise_id: int
