from __future__ import annotations

import pytest
from pydantic import ValidationError

from recordapi.domain.records import MAX_RECORD_ID, GameState, Task, User
from recordapi.repositories.database import Database
from recordapi.repositories.record_store import RecordStore


def test_insert_then_get_returns_same_record():
    store: RecordStore[Task] = RecordStore()
    task = Task(id=MAX_RECORD_ID, name="edge", completed=False)
    store.insert(task)
    assert store.get(MAX_RECORD_ID) == task
    assert store.get(0) is None


def test_update_replaces_whole_record_without_merge():
    store: RecordStore[Task] = RecordStore()
    store.insert(Task(id=1, name="a", completed=True))
    store.update(Task(id=1, name="b", completed=False))
    assert store.get(1) == Task(id=1, name="b", completed=False)
    assert len(store) == 1


def test_update_of_unknown_id_behaves_like_insert():
    store: RecordStore[Task] = RecordStore()
    store.update(Task(id=42, name="new", completed=False))
    assert store.get(42) is not None


def test_delete_missing_id_is_a_no_op():
    store: RecordStore[Task] = RecordStore()
    store.insert(Task(id=1, name="a", completed=False))
    store.delete(99)
    assert [t.id for t in store.get_all()] == [1]
    store.delete(1)
    assert store.get(1) is None
    assert store.get_all() == []


def test_get_all_is_the_surviving_set():
    store: RecordStore[Task] = RecordStore()
    for i in range(5):
        store.insert(Task(id=i, name=f"t{i}", completed=False))
    store.delete(2)
    store.update(Task(id=4, name="t4", completed=True))
    expected = {
        Task(id=0, name="t0", completed=False),
        Task(id=1, name="t1", completed=False),
        Task(id=3, name="t3", completed=False),
        Task(id=4, name="t4", completed=True),
    }
    assert set(store.get_all()) == expected


def test_records_are_immutable():
    task = Task(id=1, name="a", completed=False)
    with pytest.raises(ValidationError):
        task.name = "b"


@pytest.mark.parametrize("bad_id", [-1, MAX_RECORD_ID + 1])
def test_record_id_must_fit_in_u64(bad_id):
    with pytest.raises(ValidationError):
        Task(id=bad_id, name="x", completed=False)


@pytest.mark.parametrize(
    "fields",
    [
        {"id": "7", "name": "x", "completed": False},
        {"id": 7.0, "name": "x", "completed": False},
        {"id": 7, "name": "x", "completed": "true"},
        {"id": 7, "name": "x", "completed": 0},
    ],
)
def test_task_fields_are_not_coerced(fields):
    with pytest.raises(ValidationError):
        Task.model_validate(fields)


def test_find_user_by_name_returns_first_registered():
    db = Database()
    db.users.insert(User(id=10, username="ana", password="one"))
    db.users.insert(User(id=11, username="ana", password="two"))
    db.users.insert(User(id=12, username="bia", password="three"))

    found = db.find_user_by_name("ana")
    assert found is not None and found.id == 10
    assert db.find_user_by_name("carla") is None


def test_game_guess_tracks_letters_and_misses():
    game = GameState(id=1, word="rust")
    game = game.with_guess("r").with_guess("x").with_guess("x")
    assert game.guessed_letters == ("r", "x", "x")
    assert game.incorrect_attempts == 2
    assert game.last_move == "Guessed letter: x"


def test_game_guess_is_case_sensitive_and_saturates():
    game = GameState(id=1, word="abc", incorrect_attempts=255)
    game = game.with_guess("A")
    assert game.incorrect_attempts == 255
    assert game.last_move == "Guessed letter: A"
