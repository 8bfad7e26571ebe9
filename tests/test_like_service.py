"""Tests for likes, users and catalog queries."""

import pytest

from synergym.errors import ConflictError, NotFoundError
from synergym.models.exercise import DEFAULT_CATEGORY
from synergym.services import ExerciseLikeService, ExerciseService, UserService

SQUAT, PLANK, CAT_COW = 1, 4, 7


class TestExerciseLikes:
    """Tests for ExerciseLikeService."""

    @pytest.mark.asyncio
    async def test_add_and_query(self, seeded_db, user_id, other_user_id):
        service = ExerciseLikeService(seeded_db)
        like = await service.add(user_id, SQUAT)
        await service.add(other_user_id, SQUAT)
        await service.add(user_id, PLANK)

        assert like.id is not None
        assert await service.is_liked(user_id, SQUAT) is True
        assert await service.is_liked(other_user_id, PLANK) is False
        assert [l.exercise_id for l in await service.get_by_user(user_id)] == [SQUAT, PLANK]
        assert {l.user_id for l in await service.get_by_exercise(SQUAT)} == {
            user_id,
            other_user_id,
        }
        assert await service.count_by_exercise(SQUAT) == 2
        assert await service.count_by_exercise(CAT_COW) == 0

    @pytest.mark.asyncio
    async def test_duplicate_like_conflicts(self, seeded_db, user_id):
        service = ExerciseLikeService(seeded_db)
        await service.add(user_id, SQUAT)

        with pytest.raises(ConflictError):
            await service.add(user_id, SQUAT)
        assert await service.count_by_exercise(SQUAT) == 1

    @pytest.mark.asyncio
    async def test_delete(self, seeded_db, user_id):
        service = ExerciseLikeService(seeded_db)
        await service.add(user_id, SQUAT)

        assert await service.delete(user_id, SQUAT) is True
        assert await service.is_liked(user_id, SQUAT) is False
        assert await service.delete(user_id, SQUAT) is False

    @pytest.mark.asyncio
    async def test_like_again_after_delete(self, seeded_db, user_id):
        service = ExerciseLikeService(seeded_db)
        await service.add(user_id, SQUAT)
        await service.delete(user_id, SQUAT)

        await service.add(user_id, SQUAT)
        assert await service.is_liked(user_id, SQUAT) is True

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "user, exercise, entity",
        [(999, SQUAT, "User"), (None, 999, "Exercise")],
    )
    async def test_unknown_entities(self, seeded_db, user_id, user, exercise, entity):
        service = ExerciseLikeService(seeded_db)
        user = user if user is not None else user_id

        for call in (service.add, service.delete, service.is_liked):
            with pytest.raises(NotFoundError) as exc_info:
                await call(user, exercise)
            assert exc_info.value.entity == entity

    @pytest.mark.asyncio
    async def test_listing_for_unknown_entities(self, seeded_db):
        service = ExerciseLikeService(seeded_db)
        with pytest.raises(NotFoundError):
            await service.get_by_user(999)
        with pytest.raises(NotFoundError):
            await service.get_by_exercise(999)
        with pytest.raises(NotFoundError):
            await service.count_by_exercise(999)


class TestUsers:
    """Tests for UserService."""

    @pytest.mark.asyncio
    async def test_register_normalizes_email(self, seeded_db):
        service = UserService(seeded_db)
        user = await service.register("  Park@Example.COM ", "Park", password_hash="x1")

        assert user.email == "park@example.com"
        assert user.password_hash == "x1"
        fetched = await service.get_user(user.id)
        assert fetched.name == "Park"
        assert fetched.created_at is not None

    @pytest.mark.asyncio
    async def test_duplicate_email_conflicts(self, seeded_db, user_id):
        with pytest.raises(ConflictError):
            await UserService(seeded_db).register("KIM@example.com", "Another Kim")

    @pytest.mark.asyncio
    async def test_list_and_missing(self, seeded_db, user_id, other_user_id):
        service = UserService(seeded_db)
        assert [u.id for u in await service.list_users()] == [user_id, other_user_id]
        with pytest.raises(NotFoundError):
            await service.get_user(999)


class TestExerciseCatalog:
    """Tests for ExerciseService."""

    @pytest.mark.asyncio
    async def test_get_and_list(self, seeded_db):
        service = ExerciseService(seeded_db)

        squat = await service.get_exercise(SQUAT)
        assert squat.name == "Squat"
        assert len(await service.list_exercises()) == 8
        strength = await service.list_exercises("Strength Training")
        assert [e.name for e in strength] == ["Squat", "Bench Press", "Deadlift", "Pull-Up"]

    @pytest.mark.asyncio
    async def test_missing_exercise(self, seeded_db):
        with pytest.raises(NotFoundError):
            await ExerciseService(seeded_db).get_exercise(999)

    @pytest.mark.asyncio
    async def test_search_is_case_insensitive_substring(self, seeded_db):
        names = [e.name for e in await ExerciseService(seeded_db).search("press")]
        assert names == ["Bench Press"]

    @pytest.mark.asyncio
    async def test_categories(self, seeded_db):
        categories = await ExerciseService(seeded_db).categories()
        assert categories == {
            "Cardio": 1,
            "Core": 1,
            "Strength Training": 4,
            "Stretching": 1,
            DEFAULT_CATEGORY: 1,
        }
