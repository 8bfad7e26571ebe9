"""Like routes."""

from fastapi import APIRouter, Query, Request

from ...services import ExerciseLikeService
from ..schemas import LikeIn

router = APIRouter(prefix="/likes", tags=["likes"])


def get_service(request: Request) -> ExerciseLikeService:
    return ExerciseLikeService(request.app.state.db_path)


@router.post("", status_code=201)
async def add_like(request: Request, body: LikeIn):
    """Like an exercise. Responds 409 if the like already exists."""
    like = await get_service(request).add(body.user_id, body.exercise_id)
    return like.to_dict()


@router.delete("")
async def remove_like(
    request: Request,
    user_id: int = Query(...),
    exercise_id: int = Query(...),
):
    """Remove a like; ``removed`` is false when there was none."""
    removed = await get_service(request).delete(user_id, exercise_id)
    return {"removed": removed}


@router.get("/status")
async def like_status(
    request: Request,
    user_id: int = Query(...),
    exercise_id: int = Query(...),
):
    liked = await get_service(request).is_liked(user_id, exercise_id)
    return {"user_id": user_id, "exercise_id": exercise_id, "liked": liked}
