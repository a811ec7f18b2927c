"""Tests for the routine store service."""

import asyncio
import math

import pytest

from routine_tracker.db import RoutineRepository, connect
from routine_tracker.errors import InternalError, NotFoundError, StoreError, ValidationError
from routine_tracker.services import RoutineService, store_operation


async def _build_routine(service, user_id="alice", exercises=2, sets=2):
    routine_id = await service.create_routine(user_id, "Full body")
    exercise_ids = []
    for i in range(exercises):
        exercise_id = await service.create_exercise(routine_id, f"Exercise {i}", "back")
        exercise_ids.append(exercise_id)
        for _ in range(sets):
            await service.create_routine_exercise(exercise_id, 10, 50.0, "kg")
    return routine_id, exercise_ids


class TestCreateRoutine:
    """Tests for create_routine."""

    async def test_defaults_to_not_completed(self, service, db_path):
        routine_id = await service.create_routine("alice", "Leg day")

        routine = await RoutineRepository(db_path).get(routine_id)
        assert routine.is_completed is False
        assert routine.date is not None

    async def test_keeps_explicit_flag(self, service, db_path):
        routine_id = await service.create_routine("alice", "Leg day", is_completed=True)
        assert (await RoutineRepository(db_path).get(routine_id)).is_completed is True

    async def test_created_routine_is_dated_in_utc(self, service, db_path):
        routine_id = await service.create_routine("alice", "A")

        routine = await RoutineRepository(db_path).get(routine_id)
        assert routine.date.tzinfo is not None
        assert routine.date.utcoffset().total_seconds() == 0

    @pytest.mark.parametrize("user_id", [None, "", "   "])
    async def test_requires_user_id(self, service, user_id):
        with pytest.raises(ValidationError, match="Missing userId"):
            await service.create_routine(user_id, "Leg day")


class TestGetRoutines:
    """Tests for get_routines."""

    async def test_second_page(self, service, db_path, dated_routines):
        repo = RoutineRepository(db_path)
        for routine in dated_routines:
            await repo.create(routine)

        everything = await repo.list_by_user("alice", limit=100)
        page = await service.get_routines("alice", page=2, page_size=10)

        assert [r.id for r in page.routines] == [r.id for r in everything[10:20]]
        assert page.current_page == 2
        assert page.total_results == 25
        assert page.total_pages == math.ceil(25 / 10)

    async def test_incomplete_first_then_newest(self, service, db_path, dated_routines):
        repo = RoutineRepository(db_path)
        for routine in dated_routines:
            await repo.create(routine)

        page = await service.get_routines("alice", page=1, page_size=25)
        flags = [r.is_completed for r in page.routines]
        assert flags == sorted(flags)

        pending = [r.date for r in page.routines if not r.is_completed]
        assert pending == sorted(pending, reverse=True)

    async def test_total_counts_only_the_user(self, service):
        for _ in range(3):
            await service.create_routine("alice", "A")
        for _ in range(5):
            await service.create_routine("bob", "B")

        page = await service.get_routines("alice")
        assert page.total_results == 3
        assert page.total_pages == 1

    async def test_page_past_the_end_is_empty(self, service):
        await service.create_routine("alice", "A")

        page = await service.get_routines("alice", page=3, page_size=10)
        assert page.routines == []
        assert page.total_results == 1

    async def test_page_beyond_any_table_is_empty(self, service):
        """An offset past the largest SQLite integer yields an empty page."""
        await service.create_routine("alice", "A")

        page = await service.get_routines("alice", page=10**17, page_size=100)
        assert page.routines == []
        assert page.current_page == 10**17
        assert page.total_results == 1

    async def test_requires_user_id(self, service):
        with pytest.raises(ValidationError):
            await service.get_routines("")

    @pytest.mark.parametrize("page,page_size", [(0, 10), (-1, 10), (1, 0), (1, 1000)])
    async def test_rejects_bad_paging(self, service, page, page_size):
        with pytest.raises(ValidationError):
            await service.get_routines("alice", page=page, page_size=page_size)


class TestUpdateRoutine:
    """Tests for update_routine."""

    async def test_marks_completed(self, service, db_path):
        routine_id = await service.create_routine("alice", "A")

        assert await service.update_routine(routine_id, "alice", True) == routine_id
        assert (await RoutineRepository(db_path).get(routine_id)).is_completed is True

    async def test_wrong_owner_is_not_found(self, service, db_path):
        routine_id = await service.create_routine("alice", "A")

        with pytest.raises(NotFoundError):
            await service.update_routine(routine_id, "bob", True)
        assert (await RoutineRepository(db_path).get(routine_id)).is_completed is False

    async def test_unknown_routine_is_not_found(self, service):
        with pytest.raises(NotFoundError):
            await service.update_routine(404, "alice", True)


class TestDeleteRoutine:
    """Tests for delete_routine."""

    async def test_cascades_through_all_levels(self, service):
        routine_id, exercise_ids = await _build_routine(service, exercises=3, sets=4)

        assert await service.delete_routine("alice", routine_id) == routine_id

        with pytest.raises(NotFoundError):
            await service.get_exercises(routine_id)
        for exercise_id in exercise_ids:
            with pytest.raises(NotFoundError):
                await service.get_routine_exercises(exercise_id)
        assert (await service.get_routines("alice")).total_results == 0

    async def test_user_without_routines(self, service):
        routine_id, _ = await _build_routine(service, user_id="alice")

        with pytest.raises(NotFoundError):
            await service.delete_routine("bob", routine_id)

        detail = await service.get_exercises(routine_id)
        assert len(detail.exercises) == 2

    async def test_only_the_owner_can_delete(self, service):
        """Owning some routine is not enough: the routine itself must be yours."""
        alice_routine, _ = await _build_routine(service, user_id="alice")
        await _build_routine(service, user_id="bob")

        with pytest.raises(NotFoundError):
            await service.delete_routine("bob", alice_routine)

        assert (await service.get_routines("alice")).total_results == 1
        assert len((await service.get_exercises(alice_routine)).exercises) == 2

    async def test_store_failure_is_reported_and_rolled_back(self, service, db_path):
        routine_id, exercise_ids = await _build_routine(service, exercises=1, sets=3)
        async with connect(db_path) as db:
            await db.execute("""
                CREATE TRIGGER block_routine_delete BEFORE DELETE ON routines
                BEGIN
                    SELECT RAISE(ABORT, 'routine delete blocked');
                END
            """)
            await db.commit()

        with pytest.raises(StoreError, match="routine delete blocked"):
            await service.delete_routine("alice", routine_id)

        detail = await service.get_routine_exercises(exercise_ids[0])
        assert len(detail.routine_exercises) == 3


class TestExercises:
    """Tests for the exercise and logged-set operations."""

    async def test_created_exercise_is_listed_with_routine(self, service):
        routine_id = await service.create_routine("alice", "Upper body", is_completed=False)
        exercise_id = await service.create_exercise(routine_id, "Pull Up", "back")

        detail = await service.get_exercises(routine_id)

        assert detail.description == "Upper body"
        assert detail.is_completed is False
        assert [(e.id, e.name, e.muscle) for e in detail.exercises] == [
            (exercise_id, "Pull Up", "back")
        ]

    async def test_exercise_needs_existing_routine(self, service):
        with pytest.raises(StoreError, match="FOREIGN KEY"):
            await service.create_exercise(999, "Pull Up", "back")

    async def test_get_exercises_of_missing_routine(self, service):
        with pytest.raises(NotFoundError, match="Routine not found"):
            await service.get_exercises(999)

    async def test_routine_exercises_listed_with_exercise(self, service):
        routine_id = await service.create_routine("alice", "Legs")
        exercise_id = await service.create_exercise(routine_id, "Squat", "quads")
        first = await service.create_routine_exercise(exercise_id, 5, 100.0, "kg")
        second = await service.create_routine_exercise(exercise_id, 3, 110.0, "kg")

        detail = await service.get_routine_exercises(exercise_id)

        assert detail.name == "Squat"
        assert detail.muscle == "quads"
        assert [e.id for e in detail.routine_exercises] == [first, second]
        assert detail.routine_exercises[1].weight == 110.0

    async def test_routine_exercise_needs_existing_exercise(self, service):
        with pytest.raises(StoreError):
            await service.create_routine_exercise(999, 5, 100.0, "kg")

    async def test_get_routine_exercises_of_missing_exercise(self, service):
        with pytest.raises(NotFoundError, match="Exercise not found"):
            await service.get_routine_exercises(999)

    async def test_concurrent_sets_get_distinct_ids(self, service):
        routine_id = await service.create_routine("alice", "Legs")
        exercise_id = await service.create_exercise(routine_id, "Squat", "quads")

        ids = await asyncio.gather(*[
            service.create_routine_exercise(exercise_id, reps, 60.0, "kg")
            for reps in range(1, 21)
        ])

        assert len(set(ids)) == 20
        detail = await service.get_routine_exercises(exercise_id)
        assert sorted(e.repetitions for e in detail.routine_exercises) == list(range(1, 21))


class TestStoreOperation:
    """Tests for the store_operation error mapping."""

    async def test_unexpected_errors_become_internal(self):
        @store_operation
        async def broken():
            raise KeyError("secret detail")

        with pytest.raises(InternalError) as exc_info:
            await broken()
        assert exc_info.value.message == "Internal Server Error"
        assert "secret" not in str(exc_info.value)

    async def test_known_errors_pass_through(self):
        @store_operation
        async def missing():
            raise NotFoundError("Routine not found")

        with pytest.raises(NotFoundError):
            await missing()

    async def test_unreachable_database_is_a_store_error(self, tmp_path):
        service = RoutineService(tmp_path / "missing-dir" / "nothing.db")
        with pytest.raises(StoreError):
            await service.create_routine("alice", "A")
