"""Tests for TTLCache.

Tests expiry, overwrite, eviction, the cleanup sweep and cache key
generation using a manually advanced clock.
"""

import asyncio

import pytest

from pokegateway.services.cache import CacheEntry, TTLCache, is_expired, run_cleanup_loop

# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def cache(clock) -> TTLCache:
    """Create a TTLCache driven by the fake clock."""
    return TTLCache(clock=clock)


# =============================================================================
# Expiry Predicate Tests
# =============================================================================


class TestIsExpired:
    """Tests for the pure expiry predicate."""

    def test_visible_before_expiry(self) -> None:
        assert is_expired(CacheEntry(value=1, expires_at=10.0), now=9.999) is False

    def test_expired_at_exact_deadline(self) -> None:
        """An entry is only visible strictly before its deadline."""
        assert is_expired(CacheEntry(value=1, expires_at=10.0), now=10.0) is True

    def test_expired_after_deadline(self) -> None:
        assert is_expired(CacheEntry(value=1, expires_at=10.0), now=11.0) is True


# =============================================================================
# Get / Set Tests
# =============================================================================


class TestGetSet:
    """Tests for basic cache reads and writes."""

    def test_get_missing_returns_none(self, cache: TTLCache) -> None:
        assert cache.get("detail:1") is None

    def test_get_after_set_returns_value(self, cache: TTLCache) -> None:
        value = {"id": 1, "name": "bulbasaur"}
        cache.set("detail:1", value, ttl_seconds=60)

        assert cache.get("detail:1") == value

    def test_value_visible_until_ttl_elapses(self, cache: TTLCache, clock) -> None:
        cache.set("detail:1", "bulbasaur", ttl_seconds=60)

        clock.advance(59.9)
        assert cache.get("detail:1") == "bulbasaur"

        clock.advance(0.1)
        assert cache.get("detail:1") is None

    def test_expired_entry_is_evicted_on_read(self, cache: TTLCache, clock) -> None:
        cache.set("detail:1", "bulbasaur", ttl_seconds=5)
        clock.advance(10)

        assert len(cache) == 1
        assert cache.get("detail:1") is None
        assert len(cache) == 0

    def test_zero_ttl_is_immediately_stale(self, cache: TTLCache) -> None:
        cache.set("detail:1", "bulbasaur", ttl_seconds=0)

        assert cache.get("detail:1") is None

    def test_negative_ttl_is_already_expired(self, cache: TTLCache) -> None:
        cache.set("detail:1", "bulbasaur", ttl_seconds=-30)

        assert cache.get("detail:1") is None

    def test_overwrite_uses_latest_value_and_ttl(self, cache: TTLCache, clock) -> None:
        """A second set replaces both the value and the expiry."""
        cache.set("detail:1", "first", ttl_seconds=100)
        cache.set("detail:1", "second", ttl_seconds=10)

        assert cache.get("detail:1") == "second"

        clock.advance(50)
        assert cache.get("detail:1") is None

    def test_overwrite_can_extend_expiry(self, cache: TTLCache, clock) -> None:
        cache.set("detail:1", "first", ttl_seconds=10)
        clock.advance(5)
        cache.set("detail:1", "second", ttl_seconds=100)
        clock.advance(50)

        assert cache.get("detail:1") == "second"

    def test_contains_honours_expiry(self, cache: TTLCache, clock) -> None:
        cache.set("detail:1", "bulbasaur", ttl_seconds=10)
        assert "detail:1" in cache

        clock.advance(10)
        assert "detail:1" not in cache

    def test_default_clock_is_monotonic(self) -> None:
        cache = TTLCache()
        cache.set("detail:1", "bulbasaur", ttl_seconds=60)

        assert cache.get("detail:1") == "bulbasaur"


# =============================================================================
# Delete / Clear Tests
# =============================================================================


class TestDeleteClear:
    """Tests for removal operations."""

    def test_delete_removes_entry(self, cache: TTLCache) -> None:
        cache.set("detail:1", "bulbasaur", ttl_seconds=60)
        cache.delete("detail:1")

        assert cache.get("detail:1") is None

    def test_delete_missing_key_is_noop(self, cache: TTLCache) -> None:
        cache.delete("detail:404")

        assert len(cache) == 0

    def test_clear_removes_everything(self, cache: TTLCache) -> None:
        for i in range(5):
            cache.set(f"detail:{i}", i, ttl_seconds=60)

        cache.clear()

        assert len(cache) == 0
        assert all(cache.get(f"detail:{i}") is None for i in range(5))

    def test_clear_twice_is_idempotent(self, cache: TTLCache) -> None:
        cache.set("detail:1", "bulbasaur", ttl_seconds=60)
        cache.clear()
        cache.clear()

        assert cache.get("detail:1") is None


# =============================================================================
# Cleanup Tests
# =============================================================================


class TestCleanup:
    """Tests for the expired-entry sweep."""

    def test_cleanup_removes_only_expired(self, cache: TTLCache, clock) -> None:
        cache.set("short", 1, ttl_seconds=5)
        cache.set("long", 2, ttl_seconds=500)
        clock.advance(10)

        removed = cache.cleanup()

        assert removed == 1
        assert len(cache) == 1
        assert cache.get("long") == 2

    def test_cleanup_on_empty_cache(self, cache: TTLCache) -> None:
        assert cache.cleanup() == 0

    @pytest.mark.asyncio
    async def test_cleanup_loop_sweeps_until_cancelled(
        self, cache: TTLCache, clock
    ) -> None:
        cache.set("detail:1", "bulbasaur", ttl_seconds=1)
        clock.advance(2)

        task = asyncio.create_task(run_cleanup_loop(cache, interval_seconds=0.01))
        for _ in range(50):
            await asyncio.sleep(0.01)
            if len(cache) == 0:
                break
        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task
        assert len(cache) == 0


# =============================================================================
# Cache Key Generation Tests
# =============================================================================


class TestCacheKeyGeneration:
    """Tests for static cache key generation methods."""

    def test_list_key(self) -> None:
        assert TTLCache.list_key(0, 20) == "list:0:20"

    def test_list_keys_do_not_collide(self) -> None:
        assert TTLCache.list_key(1, 20) != TTLCache.list_key(12, 0)
        assert TTLCache.list_key(0, 20) != TTLCache.list_key(20, 0)

    def test_search_key_normalized(self) -> None:
        """Test that search keys ignore case and surrounding whitespace."""
        assert TTLCache.search_key("Saur") == "list-search:saur"
        assert TTLCache.search_key("  SAUR ") == TTLCache.search_key("saur")

    def test_detail_key(self) -> None:
        assert TTLCache.detail_key(25) == "detail:25"

    def test_prefixes_are_distinct(self) -> None:
        keys = {
            TTLCache.list_key(1, 1),
            TTLCache.search_key("1"),
            TTLCache.detail_key(1),
        }
        assert len(keys) == 3
