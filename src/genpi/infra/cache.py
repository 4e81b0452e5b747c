"""Per-sex, time-bounded cache of upstream name lists.

Each sex has its own slot holding ``(fetched_at, names)`` guarded by its own
lock. Requests try the lock without blocking: a request that finds the slot
busy (typically because another request is refreshing it over the network)
gets ``Conflict`` immediately instead of queueing.

Slot lifecycle:

- empty: fetch; on success populate, on failure stay empty.
- fresh (age <= ttl): pick a random name, no fetch.
- stale (age > ttl): restamp, then fetch. On success replace the list; on
  failure keep the old list and raise. Because the stamp already moved, the
  old list keeps being served for the next window.
"""

from __future__ import annotations

import logging
import random
import threading
import time
from dataclasses import dataclass
from typing import Callable

from ..domain.errors import Conflict, FetchFailure
from ..domain.generator import NameSource
from ..domain.models import Name, Sex

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 5.0


@dataclass
class _Slot:
    lock: threading.Lock
    fetched_at: float | None = None
    names: tuple[Name, ...] = ()


class NamesCache:
    """Cache-backed name generator.

    Implements the ``NameGenerator`` protocol. Construct once per process and
    share it between request handlers.
    """

    def __init__(
        self,
        source: NameSource,
        ttl: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
        rng: random.Random | None = None,
    ):
        self._source = source
        self._ttl = ttl
        self._clock = clock
        self._rng = rng or random.Random()
        self._slots = {sex: _Slot(lock=threading.Lock()) for sex in Sex}

    def close(self):
        close = getattr(self._source, "close", None)
        if close is not None:
            close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    def generate(self, sex: Sex) -> Name:
        """Return a random cached name for ``sex``, refreshing when stale.

        Raises:
            Conflict: Another request holds this sex's slot.
            FetchFailure: The list had to be (re)fetched and that failed.
        """
        slot = self._slots[sex]
        if not slot.lock.acquire(blocking=False):
            logger.warning("Names cache slot for %s is busy", sex.value)
            raise Conflict(sex)
        try:
            return self._generate_locked(slot, sex)
        finally:
            slot.lock.release()

    def _generate_locked(self, slot: _Slot, sex: Sex) -> Name:
        now = self._clock()
        if slot.fetched_at is not None and now - slot.fetched_at <= self._ttl:
            logger.debug("Names cache hit for %s (%d names)", sex.value, len(slot.names))
            return self._rng.choice(slot.names)

        was_populated = slot.fetched_at is not None
        if was_populated:
            slot.fetched_at = now
        names = self._fetch(sex)
        slot.fetched_at = now
        slot.names = names
        logger.info(
            "Names cache %s for %s (%d names)",
            "refreshed" if was_populated else "populated", sex.value, len(names),
        )
        return self._rng.choice(names)

    def _fetch(self, sex: Sex) -> tuple[Name, ...]:
        try:
            names = tuple(self._source.fetch(sex))
        except FetchFailure as exc:
            logger.warning("Fetching %s names failed: %s", sex.value, exc)
            raise
        if not names:
            logger.warning("Upstream returned no %s names", sex.value)
            raise FetchFailure(f"upstream returned no {sex.value} names")
        return names
