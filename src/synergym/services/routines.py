"""Routine aggregate lifecycle.

A routine and its ordered member list are always written together: every
operation below runs in one ``transaction()``, so a failure part-way through
leaves neither a routine nor a partial member list behind. The only exception
is ``create_routine_with_exercise``, which runs as two separate transactions.
"""

import logging
from pathlib import Path

import aiosqlite

from ..db.engine import get_db_path, transaction
from ..db.repositories import RoutineExerciseRepository, RoutineRepository
from ..errors import NotFoundError, PartialOperationError, SynergymError
from ..models.routine import Routine, RoutineExercise, RoutineSpec
from .lookups import require_exercise, require_routine, require_user
from .mapping import to_routine, to_routine_exercise

logger = logging.getLogger(__name__)


class RoutineService:
    """Service for routines and their ordered exercises."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def create_routine(self, spec: RoutineSpec, user_id: int) -> Routine:
        """Create a routine with its members in one transaction.

        Each entry of ``spec.exercises`` becomes a member whose order is its
        index in the list.

        Raises:
            NotFoundError: If the user or any referenced exercise is missing.
                Nothing is persisted in that case.
        """
        async with transaction(self.db_path) as db:
            await require_user(db, user_id)
            await self._require_exercises(db, spec)

            routine_id = await RoutineRepository(db).create(
                user_id, spec.name, spec.description
            )
            await self._write_members(db, routine_id, spec)
            routine = await self._load(db, routine_id)

        logger.info(
            f"Created routine {routine.id} for user {user_id} "
            f"with {len(routine.exercises)} exercise(s)"
        )
        return routine

    async def get_routine_details(self, routine_id: int) -> Routine:
        """Get one routine with its ordered members."""
        async with transaction(self.db_path) as db:
            await require_routine(db, routine_id)
            return await self._load(db, routine_id)

    async def get_routines_by_user(self, user_id: int) -> list[Routine]:
        """Get a user's non-deleted routines, members included, in one query."""
        async with transaction(self.db_path) as db:
            await require_user(db, user_id)
            rows = await RoutineRepository(db).list_with_exercises(user_id=user_id)
        return [to_routine(row) for row in rows]

    async def get_all_routines(self) -> list[Routine]:
        """Get every non-deleted routine regardless of owner."""
        async with transaction(self.db_path) as db:
            rows = await RoutineRepository(db).list_with_exercises()
        return [to_routine(row) for row in rows]

    async def get_routines_by_name(self, name: str) -> list[Routine]:
        """Get non-deleted routines whose name matches exactly."""
        async with transaction(self.db_path) as db:
            rows = await RoutineRepository(db).list_with_exercises(name=name)
        return [to_routine(row) for row in rows]

    async def update_routine(self, routine_id: int, spec: RoutineSpec) -> Routine:
        """Replace a routine's name, description and full member list.

        Existing members are deleted and re-created from ``spec.exercises``
        with fresh order values, so member ids change on every update.
        """
        async with transaction(self.db_path) as db:
            await require_routine(db, routine_id)
            await self._require_exercises(db, spec)

            await RoutineRepository(db).update(routine_id, spec.name, spec.description)
            removed = await RoutineExerciseRepository(db).delete_by_routine(routine_id)
            await self._write_members(db, routine_id, spec)
            routine = await self._load(db, routine_id)

        logger.info(
            f"Updated routine {routine_id}: replaced {removed} exercise(s) "
            f"with {len(routine.exercises)}"
        )
        return routine

    async def delete_routine(self, routine_id: int) -> None:
        """Soft-delete a routine after hard-deleting all of its members."""
        async with transaction(self.db_path) as db:
            await require_routine(db, routine_id)
            removed = await RoutineExerciseRepository(db).delete_by_routine(routine_id)
            await RoutineRepository(db).soft_delete(routine_id)

        logger.info(f"Deleted routine {routine_id} ({removed} exercise(s) removed)")

    async def add_exercise(self, routine_id: int, exercise_id: int, order: int) -> RoutineExercise:
        """Insert one exercise into a routine at the given position.

        ``order`` is clamped to ``[0, member count]``; members at or after
        that position move down by one so order stays contiguous.
        """
        async with transaction(self.db_path) as db:
            await require_routine(db, routine_id)
            await require_exercise(db, exercise_id)

            members = RoutineExerciseRepository(db)
            size = await members.count_by_routine(routine_id)
            position = max(0, min(order, size))
            await members.shift_orders(routine_id, position, 1)
            member_id = await members.create(routine_id, exercise_id, position)
            member = await members.get(member_id)

        logger.info(f"Added exercise {exercise_id} to routine {routine_id} at {position}")
        return to_routine_exercise(member)

    async def remove_exercise(self, routine_id: int, member_id: int) -> None:
        """Remove one member from a routine and close the gap in the order."""
        async with transaction(self.db_path) as db:
            await require_routine(db, routine_id)

            members = RoutineExerciseRepository(db)
            member = await members.get(member_id)
            if member is None or member.routine_id != routine_id:
                raise NotFoundError("RoutineExercise", member_id)
            await members.delete(member_id)
            await members.shift_orders(routine_id, member.exercise_order + 1, -1)

        logger.info(f"Removed member {member_id} from routine {routine_id}")

    async def create_routine_with_exercise(
        self,
        spec: RoutineSpec,
        user_id: int,
        exercise_id: int,
        order: int,
    ) -> Routine:
        """Create a routine, then add one more exercise at ``order``.

        This is two separate transactions. If adding the exercise fails, the
        routine from the first step stays committed and the failure is raised
        as ``PartialOperationError`` carrying that routine.
        """
        routine = await self.create_routine(spec, user_id)
        try:
            await self.add_exercise(routine.id, exercise_id, order)
        except (SynergymError, aiosqlite.Error) as e:
            logger.warning(
                f"Routine {routine.id} created but adding exercise {exercise_id} failed: {e}"
            )
            raise PartialOperationError(
                f"Routine {routine.id} was created but exercise {exercise_id} "
                f"could not be added: {e}",
                routine,
            ) from e
        return await self.get_routine_details(routine.id)

    async def _require_exercises(self, db: aiosqlite.Connection, spec: RoutineSpec) -> None:
        for entry in spec.exercises:
            await require_exercise(db, entry.exercise_id)

    async def _write_members(
        self, db: aiosqlite.Connection, routine_id: int, spec: RoutineSpec
    ) -> None:
        members = RoutineExerciseRepository(db)
        for index, entry in enumerate(spec.exercises):
            await members.create(routine_id, entry.exercise_id, index)

    async def _load(self, db: aiosqlite.Connection, routine_id: int) -> Routine:
        routine = await RoutineRepository(db).get(routine_id)
        members = await RoutineExerciseRepository(db).list_by_routine(routine_id)
        return to_routine(routine, members)
