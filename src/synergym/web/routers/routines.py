"""Routine routes."""

from fastapi import APIRouter, Query, Request, Response

from ...services import RoutineService
from ..schemas import RoutineExerciseAdd, RoutineIn

router = APIRouter(prefix="/routines", tags=["routines"])


def get_service(request: Request) -> RoutineService:
    """Build the routine service for the app's database."""
    return RoutineService(request.app.state.db_path)


@router.post("", status_code=201)
async def create_routine(request: Request, body: RoutineIn, user_id: int = Query(...)):
    """Create a routine with its ordered exercises."""
    routine = await get_service(request).create_routine(body.to_spec(), user_id)
    return routine.to_dict()


@router.get("")
async def list_routines(request: Request, name: str | None = None):
    """List every routine, or those matching ``name`` exactly."""
    service = get_service(request)
    if name is not None:
        routines = await service.get_routines_by_name(name)
    else:
        routines = await service.get_all_routines()
    return [routine.to_dict() for routine in routines]


@router.post("/with-exercise", status_code=201)
async def create_routine_with_exercise(
    request: Request,
    body: RoutineIn,
    user_id: int = Query(...),
    exercise_id: int = Query(...),
    order: int = Query(..., ge=0),
):
    """Create a routine, then add one more exercise at ``order``."""
    routine = await get_service(request).create_routine_with_exercise(
        body.to_spec(), user_id, exercise_id, order
    )
    return routine.to_dict()


@router.get("/{routine_id}")
async def get_routine(request: Request, routine_id: int):
    """Get a routine with its exercises."""
    routine = await get_service(request).get_routine_details(routine_id)
    return routine.to_dict()


@router.put("/{routine_id}")
async def update_routine(request: Request, routine_id: int, body: RoutineIn):
    """Replace a routine's fields and exercise list."""
    routine = await get_service(request).update_routine(routine_id, body.to_spec())
    return routine.to_dict()


@router.delete("/{routine_id}", status_code=204)
async def delete_routine(request: Request, routine_id: int):
    """Soft-delete a routine."""
    await get_service(request).delete_routine(routine_id)
    return Response(status_code=204)


@router.post("/{routine_id}/exercises", status_code=201)
async def add_exercise(request: Request, routine_id: int, body: RoutineExerciseAdd):
    """Insert one exercise into a routine."""
    member = await get_service(request).add_exercise(routine_id, body.exercise_id, body.order)
    return member.to_dict()


@router.delete("/{routine_id}/exercises/{member_id}", status_code=204)
async def remove_exercise(request: Request, routine_id: int, member_id: int):
    """Remove one exercise from a routine."""
    await get_service(request).remove_exercise(routine_id, member_id)
    return Response(status_code=204)
