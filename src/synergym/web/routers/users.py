"""User routes."""

from fastapi import APIRouter, Request

from ...services import ExerciseLikeService, RoutineService, UserService
from ..schemas import UserCreate

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", status_code=201)
async def register_user(request: Request, body: UserCreate):
    """Register a user."""
    service = UserService(request.app.state.db_path)
    user = await service.register(body.email, body.name, body.goal, body.password_hash)
    return user.to_dict()


@router.get("")
async def list_users(request: Request):
    users = await UserService(request.app.state.db_path).list_users()
    return [user.to_dict() for user in users]


@router.get("/{user_id}")
async def get_user(request: Request, user_id: int):
    user = await UserService(request.app.state.db_path).get_user(user_id)
    return user.to_dict()


@router.get("/{user_id}/routines")
async def get_user_routines(request: Request, user_id: int):
    """List a user's routines with their exercises."""
    routines = await RoutineService(request.app.state.db_path).get_routines_by_user(user_id)
    return [routine.to_dict() for routine in routines]


@router.get("/{user_id}/likes")
async def get_user_likes(request: Request, user_id: int):
    likes = await ExerciseLikeService(request.app.state.db_path).get_by_user(user_id)
    return [like.to_dict() for like in likes]
