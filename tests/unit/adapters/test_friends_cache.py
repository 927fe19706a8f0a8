"""Unit tests for the friends cache adapters."""

from concurrent.futures import ThreadPoolExecutor

from itemflow.adapters.friends_cache import InMemoryFriendsCache, NullFriendsCache
from itemflow.interfaces.errors import CacheMissError

# pylint: disable=magic-value-comparison


def test_in_memory_cache_misses_before_first_persist():
    """Reading an empty cache fails with CacheMissError."""
    error = InMemoryFriendsCache().load().exception(timeout=1)
    assert isinstance(error, CacheMissError)
    assert "no cached entries" in str(error)


def test_in_memory_cache_returns_last_persisted_list(make_friend):
    """Each persist replaces the cached list."""
    cache = InMemoryFriendsCache()
    first, second = [make_friend()], [make_friend(name="Mary")]

    cache.persist(first)
    cache.persist(second)

    assert cache.load().result(timeout=1) == second
    assert cache.persist_count == 2


def test_in_memory_cache_can_be_seeded(make_friend):
    """A seeded cache serves its seed without any persist."""
    seed = [make_friend()]
    cache = InMemoryFriendsCache(seed)

    assert cache.load().result(timeout=1) == seed
    assert cache.persist_count == 0


def test_in_memory_cache_copies_persisted_lists(make_friend):
    """Mutating the persisted list afterwards does not change the cache."""
    cache = InMemoryFriendsCache()
    friends = [make_friend()]
    cache.persist(friends)
    friends.clear()

    assert len(cache.load().result(timeout=1)) == 1


def test_in_memory_cache_concurrent_persists(make_friend):
    """Concurrent persists are all counted."""
    cache = InMemoryFriendsCache()
    friends = [make_friend()]
    with ThreadPoolExecutor(max_workers=8) as ex:
        list(ex.map(lambda _: cache.persist(friends), range(200)))

    assert cache.persist_count == 200


def test_null_cache_ignores_persist_and_reads_empty(make_friend):
    """The null cache stores nothing and reads back an empty list."""
    cache = NullFriendsCache()
    cache.persist([make_friend()])

    assert cache.load().result(timeout=1) == []
