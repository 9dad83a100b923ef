"""Path-scoped caching of listing data, with explicit invalidation."""

import hashlib
import json
import logging
from typing import Any, Callable, Optional

from django.conf import settings
from django.core.cache import caches

logger = logging.getLogger(__name__)

DASHBOARD_PATH = "/dashboard"
INVOICES_PATH = "/dashboard/invoices"
CUSTOMERS_PATH = "/dashboard/customers"


class ViewInvalidator:
    """Marks a rendered path as stale so its next render recomputes."""

    def revalidate_path(self, path: str) -> None:
        raise NotImplementedError


class ViewCache(ViewInvalidator):
    """
    Caches data behind a page, keyed by path and a per-path generation.

    Revalidating a path bumps its generation, which orphans every entry
    cached under the old one; they expire on their own timeout.
    """

    GENERATION_KEY = "view:generation:{path}"

    def __init__(self, alias: str = "default", timeout: Optional[int] = None):
        self.alias = alias
        self.timeout = timeout

    @property
    def backend(self):
        return caches[self.alias]

    def get_timeout(self) -> int:
        if self.timeout is not None:
            return self.timeout
        return getattr(settings, "VIEW_CACHE_TIMEOUT", 300)

    def generation(self, path: str) -> int:
        return self.backend.get(self.GENERATION_KEY.format(path=path), 0)

    @staticmethod
    def make_key(path: str, generation: int, name: str, *args: Any, **kwargs: Any) -> str:
        """Generate cache key from parameters."""
        key_data = f"{path}:{generation}:{name}:" + ":".join(str(a) for a in args)
        if kwargs:
            key_data += ":" + json.dumps(kwargs, sort_keys=True, default=str)
        return "view:" + hashlib.md5(key_data.encode()).hexdigest()

    def get_or_set(self, path: str, func: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        cache_key = self.make_key(path, self.generation(path), func.__name__, *args, **kwargs)

        result = self.backend.get(cache_key)
        if result is not None:
            return result

        result = func(*args, **kwargs)
        self.backend.set(cache_key, result, self.get_timeout())
        return result

    def revalidate_path(self, path: str) -> None:
        key = self.GENERATION_KEY.format(path=path)
        try:
            generation = self.backend.incr(key)
        except ValueError:
            # incr on a missing key
            self.backend.set(key, 1, None)
            generation = 1
        logger.info(f"Revalidated {path} (generation {generation})")


view_cache = ViewCache()
