"""
Query cache keyed by endpoint and parameters.

Keys are structured (endpoint plus sorted parameter pairs) rather than
concatenated URLs, so a mutation can drop every cached variant of an endpoint
or one exact filter combination.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QueryKey:
    endpoint: str
    params: tuple[tuple[str, str], ...] = field(default=())

    @classmethod
    def of(cls, endpoint: str, params: Optional[dict[str, Any]] = None) -> "QueryKey":
        """Key for an endpoint and its parameters; None values are left out."""
        pairs = tuple(
            sorted((str(name), str(value)) for name, value in (params or {}).items() if value is not None)
        )
        return cls(endpoint, pairs)

    @property
    def params_dict(self) -> dict[str, str]:
        return dict(self.params)


class QueryCache:
    def __init__(self):
        self._entries: dict[QueryKey, Any] = {}

    def __contains__(self, key: QueryKey) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def keys(self) -> list[QueryKey]:
        return list(self._entries)

    def get(self, key: QueryKey, default: Any = None) -> Any:
        return self._entries.get(key, default)

    def set(self, key: QueryKey, value: Any):
        self._entries[key] = value

    async def fetch(self, key: QueryKey, loader: Callable[[], Awaitable[Any]]) -> Any:
        """Cached value of the key, loading and storing it on a miss."""
        if key in self._entries:
            return self._entries[key]
        value = await loader()
        self._entries[key] = value
        return value

    def invalidate(self, endpoint: str, params: Optional[dict[str, Any]] = None) -> list[QueryKey]:
        """
        Drop cached queries.

        Args:
            endpoint: Endpoint whose entries are dropped
            params: When given, only the entry with exactly these parameters

        Returns:
            The keys that were dropped
        """
        if params is not None:
            key = QueryKey.of(endpoint, params)
            dropped = [key] if key in self._entries else []
            self._entries.pop(key, None)
        else:
            dropped = [key for key in self._entries if key.endpoint == endpoint]
            for key in dropped:
                del self._entries[key]

        logger.debug(f"Invalidated {len(dropped)} cached queries for {endpoint}")
        return dropped

    def clear(self):
        self._entries.clear()
