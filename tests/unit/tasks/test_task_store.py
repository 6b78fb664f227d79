"""Tests for the in-memory TaskStore."""

import threading

import pytest

from translation_service.errors import InvalidTaskTransitionError, TaskNotFoundError
from translation_service.languages import SupportedLanguage
from translation_service.tasks import TaskStore, TranslationResult, TranslationStatus, TranslationTask


def make_task() -> TranslationTask:
    return TranslationTask(
        source_language=SupportedLanguage.EN,
        target_languages=(SupportedLanguage.FR,),
        content={"title": "Hello"},
    )


def make_result() -> TranslationResult:
    return TranslationResult(
        field="title",
        language=SupportedLanguage.FR,
        text="[fr] Hello",
        status=TranslationStatus.COMPLETED,
    )


@pytest.fixture
def store() -> TaskStore:
    return TaskStore()


class TestTaskStoreLookup:
    """Tests for add/get/find."""

    def test_add_and_get(self, store):
        task = store.add(make_task())
        assert store.get(task.id) is task
        assert task.id in store
        assert len(store) == 1

    def test_duplicate_id_rejected(self, store):
        task = store.add(make_task())
        with pytest.raises(ValueError):
            store.add(task)

    def test_get_unknown_raises(self, store):
        with pytest.raises(TaskNotFoundError):
            store.get("trans_0_missing")

    def test_find_unknown_returns_none(self, store):
        assert store.find("trans_0_missing") is None

    def test_list_tasks_filters_by_status(self, store):
        first = store.add(make_task())
        store.add(make_task())
        store.start(first.id)

        assert len(store.list_tasks()) == 2
        assert [t.id for t in store.list_tasks(TranslationStatus.TRANSLATING)] == [first.id]


class TestTaskStoreTransitions:
    """Tests for the status guard and immutable replace."""

    def test_full_lifecycle(self, store):
        task = store.add(make_task())

        started = store.start(task.id)
        assert started.status == TranslationStatus.TRANSLATING
        assert started.started_at is not None

        with_result = store.append_result(task.id, make_result())
        assert len(with_result.results) == 1

        done = store.complete(task.id)
        assert done.status == TranslationStatus.COMPLETED
        assert done.completed_at is not None

    def test_snapshots_are_not_mutated(self, store):
        """Test an earlier snapshot is unchanged by later writes."""
        task = store.add(make_task())
        started = store.start(task.id)
        store.append_result(task.id, make_result())

        assert task.status == TranslationStatus.PENDING
        assert started.results == ()

    def test_fail_records_error(self, store):
        task = store.add(make_task())
        store.start(task.id)

        failed = store.fail(task.id, "All 1 translations failed")

        assert failed.status == TranslationStatus.FAILED
        assert failed.error == "All 1 translations failed"
        assert failed.completed_at is not None

    def test_cannot_skip_translating(self, store):
        task = store.add(make_task())
        with pytest.raises(InvalidTaskTransitionError):
            store.complete(task.id)

    def test_terminal_task_rejects_changes(self, store):
        task = store.add(make_task())
        store.start(task.id)
        store.complete(task.id)

        with pytest.raises(InvalidTaskTransitionError):
            store.fail(task.id, "late")
        with pytest.raises(InvalidTaskTransitionError):
            store.append_result(task.id, make_result())

    def test_append_requires_translating(self, store):
        task = store.add(make_task())
        with pytest.raises(InvalidTaskTransitionError):
            store.append_result(task.id, make_result())

    def test_concurrent_appends_are_not_lost(self, store):
        task = store.add(make_task())
        store.start(task.id)

        threads = [
            threading.Thread(target=store.append_result, args=(task.id, make_result()))
            for _ in range(50)
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(store.get(task.id).results) == 50


class TestTaskStoreRetention:
    """Tests for bounded retention."""

    def test_evicts_oldest_terminal_tasks(self):
        store = TaskStore(max_tasks=2)
        old = store.add(make_task())
        store.start(old.id)
        store.complete(old.id)
        pending = store.add(make_task())

        newest = store.add(make_task())

        assert old.id not in store
        assert pending.id in store
        assert newest.id in store

    def test_never_evicts_active_tasks(self):
        store = TaskStore(max_tasks=1)
        first = store.add(make_task())
        second = store.add(make_task())

        assert first.id in store
        assert second.id in store

    def test_zero_is_unbounded(self):
        store = TaskStore(max_tasks=0)
        for _ in range(5):
            task = store.add(make_task())
            store.start(task.id)
            store.complete(task.id)
        assert len(store) == 5
