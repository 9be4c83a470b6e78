"""Process-wide cache of scanned templates.

Callers pick a key that identifies their template text. The first use of a
key scans the template and installs the parser; later uses get the same
scanned parser back. Entries are never evicted or replaced.

Scans run before the lock is taken. The lock only guards install-or-discard,
so a long scan of one template does not block users of other keys.
"""

import threading
from typing import Final, Optional

from mypy_extensions import mypyc_attr

from sqlbind.core.scanner import TemplateParser
from sqlbind.exceptions import EmptyPlaceholderMarkerError, TemplateCacheKeyConflict
from sqlbind.utils.logging import get_logger

__all__ = ("CacheStats", "TemplateCache", "get_default_cache")

logger = get_logger("sqlbind.core.cache")

CACHE_STATS_SLOTS: Final = ("hits", "installs", "misses")
TEMPLATE_CACHE_SLOTS: Final = ("_lock", "_parsers", "_stats")


@mypyc_attr(allow_interpreted_subclasses=False)
class CacheStats:
    """Cache statistics tracking."""

    __slots__ = CACHE_STATS_SLOTS

    def __init__(self) -> None:
        self.hits = 0
        self.misses = 0
        self.installs = 0

    @property
    def total_operations(self) -> int:
        return self.hits + self.misses

    @property
    def hit_rate(self) -> float:
        """Calculate cache hit rate as percentage."""
        total = self.total_operations
        return (self.hits / total * 100) if total > 0 else 0.0

    def record_hit(self) -> None:
        self.hits += 1

    def record_miss(self) -> None:
        self.misses += 1

    def record_install(self) -> None:
        self.installs += 1

    def reset(self) -> None:
        self.hits = 0
        self.misses = 0
        self.installs = 0

    def __repr__(self) -> str:
        return (
            f"CacheStats(hit_rate={self.hit_rate:.1f}%, "
            f"hits={self.hits}, misses={self.misses}, installs={self.installs})"
        )


@mypyc_attr(allow_interpreted_subclasses=False)
class TemplateCache:
    """Registry mapping caller-chosen keys to scanned template parsers."""

    __slots__ = TEMPLATE_CACHE_SLOTS

    def __init__(self) -> None:
        self._parsers: dict[str, TemplateParser] = {}
        self._lock = threading.Lock()
        self._stats = CacheStats()

    def get(self, key: str) -> Optional[TemplateParser]:
        """Look up a cached parser without scanning anything."""
        with self._lock:
            return self._parsers.get(key)

    def get_parser(self, key: str, template: str) -> TemplateParser:
        """Get a scanned parser for ``template``, reusing the one cached under ``key``.

        An empty key disables caching: a fresh, unscanned parser is returned.
        A template that fails to scan is not cached; its unscanned parser is
        returned so the error surfaces when the SQL is rendered.

        Args:
            key: Caller-chosen identity of the template text.
            template: The SQL template.

        Raises:
            TemplateCacheKeyConflict: If ``key`` is cached for a template of a different length.

        Returns:
            The template parser.
        """
        if not key:
            return TemplateParser(template)

        with self._lock:
            cached = self._parsers.get(key)
            if cached is not None:
                self._stats.record_hit()
        if cached is not None:
            logger.debug(
                "Template cache hit for key %r", key, extra={"extra_fields": {"cache_key": key, "outcome": "hit"}}
            )
            return self._check_template(key, cached, template)

        parser = TemplateParser(template)
        try:
            parser.scan()
        except EmptyPlaceholderMarkerError:
            logger.debug(
                "Not caching template for key %r: scan failed",
                key,
                extra={"extra_fields": {"cache_key": key, "outcome": "error"}},
            )
            return parser

        with self._lock:
            cached = self._parsers.setdefault(key, parser)
            if cached is parser:
                self._stats.record_miss()
                self._stats.record_install()
            else:
                self._stats.record_hit()
        if cached is parser:
            logger.debug(
                "Template cache miss for key %r: installed parser",
                key,
                extra={"extra_fields": {"cache_key": key, "outcome": "install"}},
            )
            return parser
        logger.debug(
            "Template cache race for key %r: discarded duplicate scan",
            key,
            extra={"extra_fields": {"cache_key": key, "outcome": "discard"}},
        )
        return self._check_template(key, cached, template)

    @staticmethod
    def _check_template(key: str, cached: TemplateParser, template: str) -> TemplateParser:
        if len(cached.template) != len(template):
            raise TemplateCacheKeyConflict(key, len(cached.template), len(template))
        return cached

    def clear(self) -> None:
        """Drop every cached parser and reset statistics."""
        with self._lock:
            self._parsers.clear()
            self._stats.reset()

    def get_stats(self) -> CacheStats:
        return self._stats

    def __len__(self) -> int:
        with self._lock:
            return len(self._parsers)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._parsers


_default_cache: Optional[TemplateCache] = None
_default_cache_lock = threading.Lock()


def get_default_cache() -> TemplateCache:
    """Get the process-wide template cache used when none is injected."""
    global _default_cache  # noqa: PLW0603
    if _default_cache is None:
        with _default_cache_lock:
            if _default_cache is None:
                _default_cache = TemplateCache()
    return _default_cache
