"""
Application cache tests.
"""

from app.core.cache import AppCache, CALENDAR, REPORTS


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def test_entries_expire():
    clock = FakeClock()
    cache = AppCache(ttl_seconds=10, clock=clock)
    cache.set(REPORTS, "k", 1)

    assert cache.get(REPORTS, "k") == 1
    clock.now = 10
    assert cache.get(REPORTS, "k") is None


def test_invalidate_only_touches_named_namespaces():
    cache = AppCache()
    cache.set(REPORTS, "a", 1)
    cache.set(CALENDAR, "a", 2)

    cache.invalidate(REPORTS)

    assert cache.get(REPORTS, "a") is None
    assert cache.get(CALENDAR, "a") == 2
    assert len(cache) == 1


async def test_get_or_set_computes_once():
    cache = AppCache()
    calls = []

    async def factory():
        calls.append(1)
        return "value"

    assert await cache.get_or_set(REPORTS, "k", factory) == "value"
    assert await cache.get_or_set(REPORTS, "k", factory) == "value"
    assert len(calls) == 1
