"""
Unit tests for the in-memory TaskStore.
Covers single-threaded semantics and behaviour under concurrent access.
"""
from concurrent.futures import ThreadPoolExecutor
from dataclasses import replace

from django.test import SimpleTestCase

from apps.tasks.models import Task
from apps.tasks.store import TaskStore


def make_task(task_id="t-1", **overrides):
    fields = dict(id=task_id, title="Buy milk", description="2%", created_at=1_000)
    fields.update(overrides)
    return Task(**fields)


class TaskStoreTest(SimpleTestCase):
    """Test basic store operations."""

    def setUp(self):
        self.store = TaskStore()

    def test_empty_store_lists_nothing(self):
        self.assertEqual(self.store.list(), [])
        self.assertIsNone(self.store.get("missing"))

    def test_insert_then_get(self):
        task = make_task()
        stored = self.store.insert(task)
        self.assertEqual(stored, task)
        self.assertEqual(self.store.get("t-1"), task)

    def test_insert_overwrites_same_id(self):
        self.store.insert(make_task())
        self.store.insert(make_task(title="Buy bread"))
        self.assertEqual(len(self.store.list()), 1)
        self.assertEqual(self.store.get("t-1").title, "Buy bread")

    def test_list_returns_snapshot(self):
        self.store.insert(make_task("a"))
        snapshot = self.store.list()
        self.store.insert(make_task("b"))
        self.assertEqual([t.id for t in snapshot], ["a"])
        self.assertEqual({t.id for t in self.store.list()}, {"a", "b"})

    def test_update_existing(self):
        self.store.insert(make_task())
        updated = self.store.update(make_task(is_completed=True))
        self.assertTrue(updated.is_completed)
        self.assertTrue(self.store.get("t-1").is_completed)

    def test_update_unknown_id_does_not_insert(self):
        self.assertIsNone(self.store.update(make_task("ghost")))
        self.assertIsNone(self.store.get("ghost"))
        self.assertEqual(self.store.list(), [])

    def test_update_after_delete_does_not_resurrect(self):
        self.store.insert(make_task())
        self.assertTrue(self.store.delete("t-1"))
        self.assertIsNone(self.store.update(make_task()))
        self.assertIsNone(self.store.get("t-1"))

    def test_delete_reports_removal(self):
        self.store.insert(make_task())
        self.assertTrue(self.store.delete("t-1"))
        self.assertFalse(self.store.delete("t-1"))
        self.assertFalse(self.store.delete("never-existed"))

    def test_single_stripe_store_works(self):
        store = TaskStore(stripes=1)
        store.insert(make_task("a"))
        store.insert(make_task("b"))
        self.assertEqual(len(store.list()), 2)

    def test_rejects_zero_stripes(self):
        with self.assertRaises(ValueError):
            TaskStore(stripes=0)


class TaskStoreConcurrencyTest(SimpleTestCase):
    """Hammer the store from several threads."""

    WORKERS = 8
    COUNT = 400

    def setUp(self):
        self.store = TaskStore(stripes=4)

    def test_concurrent_inserts_keep_every_task(self):
        tasks = [make_task(f"task-{i}") for i in range(self.COUNT)]
        with ThreadPoolExecutor(max_workers=self.WORKERS) as pool:
            list(pool.map(self.store.insert, tasks))

        self.assertEqual(len(self.store.list()), self.COUNT)
        self.assertEqual({t.id for t in self.store.list()}, {t.id for t in tasks})

    def test_racing_update_and_delete_never_leaves_a_record(self):
        tasks = [make_task(f"task-{i}") for i in range(self.COUNT)]
        for task in tasks:
            self.store.insert(task)

        def update(task):
            return self.store.update(replace(task, is_completed=True))

        with ThreadPoolExecutor(max_workers=self.WORKERS) as pool:
            deletes = pool.map(self.store.delete, [t.id for t in tasks])
            updates = pool.map(update, tasks)
            delete_results = list(deletes)
            update_results = list(updates)

        # Every delete found its record; updates either landed first or saw nothing.
        self.assertTrue(all(delete_results))
        for result in update_results:
            self.assertTrue(result is None or result.is_completed)
        self.assertEqual(self.store.list(), [])

    def test_list_while_writing(self):
        def writer(i):
            self.store.insert(make_task(f"task-{i}"))
            self.store.delete(f"task-{i}")

        def reader(_):
            return self.store.list()

        with ThreadPoolExecutor(max_workers=self.WORKERS) as pool:
            writes = pool.map(writer, range(self.COUNT))
            reads = pool.map(reader, range(self.COUNT))
            list(writes)
            snapshots = list(reads)

        for snapshot in snapshots:
            self.assertTrue(all(isinstance(t, Task) for t in snapshot))
        self.assertEqual(self.store.list(), [])
