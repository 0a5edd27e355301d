"""
Application-scoped cache for derived, read-heavy results.
One instance lives in the DI container; services invalidate namespaces
explicitly after every successful mutation.
"""

import time
import logging
from typing import Any, Awaitable, Callable, Dict, Hashable, Optional, Tuple

logger = logging.getLogger(__name__)

# Namespaces
REPORTS = "reports"
CALENDAR = "calendar"


class AppCache:
    """In-process TTL cache keyed by (namespace, key)."""

    def __init__(self, ttl_seconds: int = 300, clock: Callable[[], float] = time.monotonic):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: Dict[str, Dict[Hashable, Tuple[float, Any]]] = {}

    def get(self, namespace: str, key: Hashable) -> Optional[Any]:
        """Return a cached value, or None when missing or expired."""
        bucket = self._entries.get(namespace)
        if not bucket or key not in bucket:
            return None
        expires_at, value = bucket[key]
        if self._clock() >= expires_at:
            del bucket[key]
            return None
        return value

    def set(self, namespace: str, key: Hashable, value: Any) -> None:
        self._entries.setdefault(namespace, {})[key] = (self._clock() + self.ttl_seconds, value)

    async def get_or_set(
        self,
        namespace: str,
        key: Hashable,
        factory: Callable[[], Awaitable[Any]],
    ) -> Any:
        """Read through the cache, computing and storing the value on a miss."""
        cached = self.get(namespace, key)
        if cached is not None:
            return cached
        value = await factory()
        self.set(namespace, key, value)
        return value

    def invalidate(self, *namespaces: str) -> None:
        """Drop every entry in the given namespaces."""
        for namespace in namespaces:
            if self._entries.pop(namespace, None):
                logger.debug(f"Cache namespace invalidated: {namespace}")

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._entries.values())
