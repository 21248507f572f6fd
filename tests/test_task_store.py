# tests/test_task_store.py

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from datetime import date

from todo_tracker.tasks.task_models import TaskStatus
from todo_tracker.tasks.task_store import TaskStore


def test_create_assigns_sequential_ids_starting_at_one(store: TaskStore) -> None:
    ids = [store.create(f"task {i}", None, None).id for i in range(5)]
    assert ids == [1, 2, 3, 4, 5]


def test_created_task_is_pending(store: TaskStore) -> None:
    task = store.create("Pay rent", "monthly", date(2024, 1, 5))

    assert task.completed is False
    assert task.status == TaskStatus.PENDING
    assert task.title == "Pay rent"
    assert task.description == "monthly"
    assert task.due_date == date(2024, 1, 5)


def test_ids_are_never_reused_after_delete(store: TaskStore) -> None:
    first = store.create("a", None, None)
    second = store.create("b", None, None)
    assert store.delete(second.id) is True
    assert store.delete(first.id) is True

    third = store.create("c", None, None)
    assert third.id == 3


def test_each_store_owns_its_counter() -> None:
    a = TaskStore()
    b = TaskStore()
    a.create("x", None, None)
    a.create("y", None, None)

    assert b.create("z", None, None).id == 1


def test_concurrent_creates_get_unique_gap_free_ids(store: TaskStore) -> None:
    with ThreadPoolExecutor(max_workers=8) as pool:
        tasks = list(pool.map(lambda i: store.create(f"t{i}", None, None), range(200)))

    assert sorted(t.id for t in tasks) == list(range(1, 201))
    assert store.count_tasks() == 200


def test_delete_then_find_yields_none(store: TaskStore) -> None:
    task = store.create("temp", None, None)
    assert store.find_by_id(task.id) is task

    assert store.delete(task.id) is True
    assert store.find_by_id(task.id) is None


def test_delete_missing_id_returns_false_and_changes_nothing(store: TaskStore) -> None:
    store.create("a", None, None)
    store.create("b", None, None)
    before = [(t.id, t.title, t.completed) for t in store.list_all()]

    assert store.delete(42) is False
    assert [(t.id, t.title, t.completed) for t in store.list_all()] == before


def test_find_by_id_missing_returns_none(store: TaskStore) -> None:
    assert store.find_by_id(1) is None


def test_list_pending_sorts_by_due_date_with_undated_last(store: TaskStore) -> None:
    store.create("march", None, date(2024, 3, 1))
    store.create("undated", None, None)
    store.create("january", None, date(2024, 1, 1))

    pending = store.list_pending()
    assert [t.due_date for t in pending] == [date(2024, 1, 1), date(2024, 3, 1), None]


def test_list_pending_keeps_insertion_order_for_ties(store: TaskStore) -> None:
    store.create("undated 1", None, None)
    store.create("same day 1", None, date(2024, 5, 5))
    store.create("undated 2", None, None)
    store.create("same day 2", None, date(2024, 5, 5))

    titles = [t.title for t in store.list_pending()]
    assert titles == ["same day 1", "same day 2", "undated 1", "undated 2"]


def test_list_pending_excludes_completed(store: TaskStore) -> None:
    done = store.create("done", None, date(2024, 1, 1))
    store.create("open", None, None)
    store.mark_completed(done.id)

    pending = store.list_pending()
    assert [t.title for t in pending] == ["open"]
    assert all(not t.completed for t in pending)


def test_list_pending_empty(store: TaskStore) -> None:
    assert store.list_pending() == []


def test_search_is_case_insensitive_substring(store: TaskStore) -> None:
    store.create("Buy Milk", None, None)
    store.create("Walk dog", None, None)

    assert [t.title for t in store.search_by_title("milk")] == ["Buy Milk"]
    assert [t.title for t in store.search_by_title("MILK")] == ["Buy Milk"]
    assert store.search_by_title("cheese") == []


def test_search_with_empty_query_returns_everything(store: TaskStore) -> None:
    store.create("one", None, None)
    two = store.create("two", None, None)
    store.mark_completed(two.id)

    assert [t.id for t in store.search_by_title("")] == [1, 2]


def test_search_includes_completed_tasks_in_insertion_order(store: TaskStore) -> None:
    store.create("report draft", None, date(2024, 9, 1))
    final = store.create("report final", None, date(2024, 1, 1))
    store.mark_completed(final.id)

    assert [t.title for t in store.search_by_title("report")] == ["report draft", "report final"]


def test_mark_completed_missing_returns_false(store: TaskStore) -> None:
    assert store.mark_completed(7) is False


def test_mark_completed_twice_is_a_no_op(store: TaskStore) -> None:
    store.create("a", None, None)
    task = store.create("b", None, None)

    assert store.mark_completed(task.id) is True
    snapshot = [t.id for t in store.list_all()]

    assert store.mark_completed(task.id) is True
    assert [t.id for t in store.list_all()] == snapshot
    assert store.find_by_id(task.id).completed is True


def test_completion_through_shared_reference_is_visible(store: TaskStore) -> None:
    task = store.create("a", None, None)
    found = store.find_by_id(task.id)
    assert found is not None

    found.completed = True
    assert store.list_pending() == []


def test_list_all_returns_a_new_list(store: TaskStore) -> None:
    store.create("a", None, None)
    listing = store.list_all()
    listing.clear()

    assert store.count_tasks() == 1


def test_pay_rent_scenario(store: TaskStore) -> None:
    rent = store.create("Pay rent", "", date(2024, 1, 5))
    house = store.create("Clean house", "desc", None)
    assert (rent.id, rent.completed) == (1, False)
    assert (house.id, house.completed) == (2, False)

    assert store.mark_completed(1) is True

    assert [t.id for t in store.list_pending()] == [2]
    assert [(t.id, t.completed) for t in store.list_all()] == [(1, True), (2, False)]

    assert store.delete(1) is True
    assert store.find_by_id(1) is None
    assert store.delete(1) is False
