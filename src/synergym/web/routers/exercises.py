"""Exercise catalog routes."""

from fastapi import APIRouter, Query, Request

from ...services import ExerciseLikeService, ExerciseService

router = APIRouter(prefix="/exercises", tags=["exercises"])


@router.get("")
async def list_exercises(request: Request, category: str | None = None):
    exercises = await ExerciseService(request.app.state.db_path).list_exercises(category)
    return [exercise.to_dict() for exercise in exercises]


@router.get("/search")
async def search_exercises(request: Request, q: str = Query(..., min_length=1)):
    exercises = await ExerciseService(request.app.state.db_path).search(q)
    return [exercise.to_dict() for exercise in exercises]


@router.get("/categories")
async def list_categories(request: Request):
    return await ExerciseService(request.app.state.db_path).categories()


@router.get("/{exercise_id}")
async def get_exercise(request: Request, exercise_id: int):
    exercise = await ExerciseService(request.app.state.db_path).get_exercise(exercise_id)
    return exercise.to_dict()


@router.get("/{exercise_id}/likes")
async def get_exercise_likes(request: Request, exercise_id: int):
    likes = await ExerciseLikeService(request.app.state.db_path).get_by_exercise(exercise_id)
    return [like.to_dict() for like in likes]


@router.get("/{exercise_id}/likes/count")
async def count_exercise_likes(request: Request, exercise_id: int):
    count = await ExerciseLikeService(request.app.state.db_path).count_by_exercise(exercise_id)
    return {"exercise_id": exercise_id, "count": count}
