"""
Tests for the thread-safe VariableStore.
"""

import threading

import pytest

from envstore.core.store import Entry, VariableStore
from envstore.exceptions import AllocationError, StoreError, StoreNotInitializedError


@pytest.fixture
def store():
    s = VariableStore()
    s.initialize(10)
    return s


@pytest.mark.unit
class TestLifecycle:
    def test_starts_uninitialized(self):
        s = VariableStore()
        assert not s.initialized
        assert s.capacity == 0
        assert len(s) == 0

    def test_initialize_sets_capacity(self, store):
        assert store.initialized
        assert store.capacity == 10

    def test_initialize_is_noop_when_initialized(self, store):
        store.insert("A", "1")
        store.initialize(50)
        assert store.capacity == 10
        assert store.lookup("A") == "1"

    def test_initialize_rejects_non_positive(self):
        with pytest.raises(ValueError, match="positive"):
            VariableStore().initialize(0)

    def test_insert_before_initialize_raises(self):
        with pytest.raises(StoreNotInitializedError):
            VariableStore().insert("A", "1")

    def test_not_initialized_is_store_error(self):
        assert issubclass(StoreNotInitializedError, StoreError)

    def test_reset_clears_everything(self, store):
        store.insert("A", "1")
        store.reset()
        assert not store.initialized
        assert store.capacity == 0
        assert len(store) == 0
        assert store.lookup("A") is None

    def test_insert_after_reset_requires_initialize(self, store):
        store.reset()
        with pytest.raises(StoreNotInitializedError):
            store.insert("A", "1")
        store.initialize(4)
        store.insert("A", "2")
        assert store.lookup("A") == "2"

    def test_reset_uninitialized_is_safe(self):
        s = VariableStore()
        s.reset()
        assert not s.initialized


@pytest.mark.unit
class TestLookup:
    def test_lookup_missing(self, store):
        assert store.lookup("nope") is None

    def test_lookup_on_uninitialized(self):
        assert VariableStore().lookup("A") is None

    def test_first_match_wins(self, store):
        store.insert("A", "first")
        store.insert("A", "second")
        assert store.lookup("A") == "first"
        assert len(store) == 2

    def test_exact_key_match(self, store):
        store.insert("Key", "1")
        assert store.lookup("key") is None
        assert store.lookup("Key ") is None

    def test_empty_value_is_present(self, store):
        store.insert("EMPTY", "")
        assert store.lookup("EMPTY") == ""
        assert "EMPTY" in store

    def test_contains(self, store):
        store.insert("A", "1")
        assert "A" in store
        assert "B" not in store
        assert 1 not in store

    def test_entries_keep_duplicates(self, store):
        store.insert("A", "1")
        store.insert("B", "2")
        store.insert("A", "3")
        assert store.entries() == [Entry("A", "1"), Entry("B", "2"), Entry("A", "3")]

    def test_as_dict_first_match(self, store):
        store.insert("A", "1")
        store.insert("B", "2")
        store.insert("A", "3")
        assert store.as_dict() == {"A": "1", "B": "2"}
        assert list(store.as_dict()) == ["A", "B"]


@pytest.mark.unit
class TestGrowth:
    def test_grows_past_initial_capacity(self, store):
        for i in range(11):
            store.insert(f"K{i}", str(i))
        assert store.capacity == 20
        assert all(store.lookup(f"K{i}") == str(i) for i in range(11))

    def test_capacity_doubles_repeatedly(self):
        s = VariableStore()
        s.initialize(1)
        for i in range(5):
            s.insert(f"K{i}", "v")
        assert s.capacity == 8

    def test_max_capacity_blocks_growth(self):
        s = VariableStore(max_capacity=3)
        s.initialize(2)
        s.insert("A", "1")
        s.insert("B", "2")
        with pytest.raises(AllocationError) as exc_info:
            s.insert("C", "3")
        assert exc_info.value.requested == 4
        assert exc_info.value.capacity == 2
        assert s.entries() == [Entry("A", "1"), Entry("B", "2")]
        assert s.capacity == 2

    def test_initial_capacity_over_limit(self):
        with pytest.raises(AllocationError):
            VariableStore(max_capacity=5).initialize(10)

    def test_memory_error_during_growth(self, store):
        for i in range(10):
            store.insert(f"K{i}", "v")

        class ExplodingList(list):
            def extend(self, _items):
                raise MemoryError

        store._slots = ExplodingList(store._slots)
        with pytest.raises(AllocationError, match="Failed to grow"):
            store.insert("OVER", "v")
        assert len(store) == 10
        assert store.lookup("K9") == "v"

    def test_repr(self, store):
        assert "VariableStore" in repr(store)


@pytest.mark.integration
class TestConcurrency:
    def test_concurrent_inserts_lose_nothing(self):
        s = VariableStore()
        s.initialize(1)
        per_thread = 200

        def worker(prefix):
            for i in range(per_thread):
                s.insert(f"{prefix}{i}", str(i))

        threads = [threading.Thread(target=worker, args=(f"T{n}_",)) for n in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(s) == 4 * per_thread
        for n in range(4):
            for i in range(per_thread):
                assert s.lookup(f"T{n}_{i}") == str(i)

    def test_readers_during_writes(self):
        s = VariableStore()
        s.initialize(2)
        s.insert("STABLE", "yes")
        errors = []
        stop = threading.Event()

        def reader():
            while not stop.is_set():
                if s.lookup("STABLE") != "yes":
                    errors.append("lost STABLE")
                s.entries()

        readers = [threading.Thread(target=reader) for _ in range(3)]
        for t in readers:
            t.start()
        for i in range(500):
            s.insert(f"K{i}", "v")
        stop.set()
        for t in readers:
            t.join()

        assert errors == []
        assert len(s) == 501
