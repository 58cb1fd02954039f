from openmenu.lru import LruCache


def test_find_missing_returns_none():
    cache = LruCache(2)
    assert cache.find("A") is None


def test_add_and_find():
    cache = LruCache(2)
    cache.add("A", 5)
    assert cache.find("A") == 5
    assert len(cache) == 1


def test_evicts_oldest_when_full():
    cache = LruCache(2)
    cache.add("A", 1)
    cache.add("B", 2)
    cache.add("C", 3)
    assert len(cache) == 2
    assert cache.find("A") is None
    assert cache.find("B") == 2
    assert cache.find("C") == 3


def test_find_refreshes_non_oldest_entry():
    cache = LruCache(3)
    cache.add("A", 1)
    cache.add("B", 2)
    cache.add("C", 3)
    cache.find("B")
    assert list(cache) == ["A", "C", "B"]


def test_find_of_oldest_does_not_move_it():
    cache = LruCache(3)
    cache.add("A", 1)
    cache.add("B", 2)
    cache.find("A")
    assert list(cache) == ["A", "B"]


def test_on_add_value_replaces_given_value():
    cache = LruCache(2, on_add=lambda key: 42)
    cache.add("A", 0)
    assert cache.find("A") == 42


def test_on_add_none_keeps_given_value():
    cache = LruCache(2, on_add=lambda key: None)
    cache.add("A", 9)
    assert cache.find("A") == 9


def test_eviction_calls_remove_then_reclaims():
    free = [0, 1]
    removed = []

    def on_add(key):
        return free.pop(0) if free else None

    def on_remove(key, value):
        removed.append((key, value))
        free.append(value)

    cache = LruCache(2, on_add=on_add, on_remove=on_remove)
    cache.add("A", 0)
    cache.add("B", 0)
    cache.add("C", 0)
    assert removed == [("A", 0)]
    assert cache.find("C") == 0
    assert free == []


def test_clear_removes_all_in_order():
    removed = []
    cache = LruCache(3, on_remove=lambda key, value: removed.append(key))
    cache.add("A", 1)
    cache.add("B", 2)
    cache.clear()
    assert len(cache) == 0
    assert removed == ["A", "B"]