"""
Memoizing layer around the ranking engine.

The engine itself keeps no state between calls. Hosts that re-rank the
same pool repeatedly can wrap it in a RankingCache, which keys results on
a content hash of everything that influences them.
"""

import hashlib
import json
import threading
from collections import OrderedDict
from datetime import datetime
from typing import Any, Optional, Sequence, Union

from src.core.ranking import RankingEngine, resolve_options
from src.core.scoring.composite_scorer import as_candidate, as_job
from src.data.models import JobPosting, RankedCandidate
from src.utils.clock import as_utc
from src.utils.config import get_settings
from src.utils.constants import SortBy
from src.utils.logger import LoggerMixin


class RankingCache(LoggerMixin):
    """
    Bounded LRU cache of ranking results.

    Results are keyed on a SHA-256 hash of (candidates, job, effective
    options, now). Cached RankedCandidate records are shared between
    callers and must be treated as read-only.
    """

    def __init__(self, engine: RankingEngine, max_entries: Optional[int] = None):
        """
        Initialize the cache.

        Args:
            engine: Engine computing results on a miss
            max_entries: Maximum number of cached rankings; read from
                RANKING_CACHE_MAX_ENTRIES when omitted
        """
        if max_entries is None:
            max_entries = get_settings().ranking.cache_max_entries
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")

        self.engine = engine
        self.max_entries = max_entries
        self.hits = 0
        self.misses = 0
        self._entries: OrderedDict[str, list[RankedCandidate]] = OrderedDict()
        self._lock = threading.Lock()

    def rank(
        self,
        candidates: Sequence[Any],
        job: Union[JobPosting, dict[str, Any], None],
        options: Any = None,
        now: Optional[datetime] = None,
    ) -> list[RankedCandidate]:
        """
        Rank a pool, reusing a previous result for identical input.

        Args:
            candidates: Candidate records
            job: Job posting
            options: Ranking options
            now: Reference instant; read from the engine's clock when omitted

        Returns:
            Ranked candidates, as RankingEngine.rank returns them
        """
        now = now or self.engine.clock.now()
        key = self.cache_key(candidates, job, options, now)

        with self._lock:
            cached = self._entries.get(key)
            if cached is not None:
                self._entries.move_to_end(key)
                self.hits += 1
                return list(cached)

        ranked = self.engine.rank(candidates, job, options, now=now)

        with self._lock:
            self.misses += 1
            self._entries[key] = ranked
            self._entries.move_to_end(key)
            while len(self._entries) > self.max_entries:
                evicted, _ = self._entries.popitem(last=False)
                self.logger.debug(f"Evicted ranking cache entry {evicted[:12]}")

        return list(ranked)

    def cache_key(
        self,
        candidates: Sequence[Any],
        job: Union[JobPosting, dict[str, Any], None],
        options: Any,
        now: datetime,
    ) -> str:
        """Content hash of every input that affects a ranking."""
        resolved = resolve_options(options)
        weights = (
            resolved.weights if "weights" in resolved.model_fields_set else self.engine.weights
        )
        payload = {
            "candidates": [as_candidate(c).model_dump(mode="json") for c in candidates or []],
            "job": as_job(job).model_dump(mode="json"),
            "weights": weights.to_dict(),
            "sort_by": SortBy(resolved.sort_by).value,
            "include_analysis": resolved.include_analysis,
            "now": as_utc(now).isoformat(),
        }
        encoded = json.dumps(payload, sort_keys=True, default=str).encode("utf-8")
        return hashlib.sha256(encoded).hexdigest()

    def clear(self) -> None:
        """Drop every cached ranking."""
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0

    def __len__(self) -> int:
        return len(self._entries)
