from __future__ import annotations

import glob
import logging
import re
from abc import ABC, abstractmethod
from collections.abc import Callable
from datetime import UTC, datetime
from pathlib import Path

from .errors import InvalidCache

logger = logging.getLogger(__name__)

EPOCH = datetime.fromtimestamp(0, UTC)

_STAMP = re.compile(r"_(\d+)\.txt$")
_STAMP_PLACEHOLDER = re.compile(r"_[^_]*\.txt$")

Fetcher = Callable[[], str]
Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(UTC)


class RawRegistryStore(ABC):
    """
    Where raw registry text comes from and goes to.

    fetch() goes to the network, read()/write() to the cache, and
    current_timestamp() tells when the cached text was last refreshed.
    """

    def __init__(self, fetcher: Fetcher | None = None, clock: Clock = utc_now) -> None:
        self._fetcher = fetcher
        self._clock = clock

    def fetch(self) -> str:
        if self._fetcher is None:
            return ""
        return self._fetcher()

    @abstractmethod
    def read(self) -> str | None: ...

    @abstractmethod
    def write(self, text: str) -> None: ...

    @abstractmethod
    def current_timestamp(self) -> datetime: ...


# -------------------------------------------------
# File cache
# -------------------------------------------------

class FileCache(RawRegistryStore):
    """
    Registry text kept in a single file whose name embeds its update time.

    The pattern names the file family, e.g. "~/.cache/oui_*.txt"; the
    actual file is "oui_<epoch seconds>.txt" ("oui_0.txt" before the first write).
    """

    def __init__(self, pattern: str | Path, fetcher: Fetcher | None = None, clock: Clock = utc_now) -> None:
        super().__init__(fetcher, clock)
        self.pattern = str(Path(pattern).expanduser())

    def path(self) -> Path:
        matches = [Path(p) for p in glob.glob(self.pattern)]
        if matches:
            return max(matches, key=_stamp_of)
        p = Path(self.pattern)
        return p.with_name(_STAMP_PLACEHOLDER.sub("_0.txt", p.name))

    def current_timestamp(self) -> datetime:
        return datetime.fromtimestamp(_stamp_of(self.path()), UTC)

    def read(self) -> str | None:
        p = self.path()
        if not p.exists():
            return None
        return p.read_text(encoding="utf-8")

    def write(self, text: str) -> None:
        p = self.path()
        try:
            p.write_text(text, encoding="utf-8")
        except FileNotFoundError as e:
            raise InvalidCache(f"Cache directory does not exist: {p.parent}") from e

        stamp = int(self._clock().timestamp())
        target = p.with_name(_STAMP.sub(f"_{stamp}.txt", p.name))
        p.replace(target)
        logger.info("Cached OUI registry at %s", target)


def _stamp_of(path: Path) -> int:
    m = _STAMP.search(path.name)
    return int(m.group(1)) if m else 0


# -------------------------------------------------
# Callback cache
# -------------------------------------------------

class CallbackCache(RawRegistryStore):
    """
    Registry text kept by the caller (database row, shared memory, ...).

    `timestamp` is the update time of the caller's copy; set it whenever
    the copy changes outside this process. write() stamps the current time.
    """

    def __init__(
        self,
        read_fn: Callable[[], str | None],
        write_fn: Callable[[str], object],
        fetcher: Fetcher | None = None,
        timestamp: datetime | None = None,
        clock: Clock = utc_now,
    ) -> None:
        super().__init__(fetcher, clock)
        self._read_fn = read_fn
        self._write_fn = write_fn
        self.timestamp = timestamp or EPOCH

    def current_timestamp(self) -> datetime:
        return self.timestamp

    def read(self) -> str | None:
        return self._read_fn()

    def write(self, text: str) -> None:
        self._write_fn(text)
        self.timestamp = self._clock()
