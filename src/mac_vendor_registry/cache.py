from __future__ import annotations

import logging
import threading
from datetime import datetime, timedelta

from .address import Address
from .config import Config
from .errors import InvalidCache, InvalidRawData, NotFoundOuiVendor
from .fetch import HttpFetcher
from .parser import VendorRecord, parse_registry
from .store import Clock, FileCache, RawRegistryStore, utc_now
from .tables import RegistryTables, build_tables

logger = logging.getLogger(__name__)


class RegistryCache:
    """
    In-memory OUI vendor tables backed by a RawRegistryStore.

    Tables are built lazily on first use and rebuilt when the store's copy
    is expired (older than the ttl, refetched from the network) or stale
    (refreshed by another writer since this instance loaded it).
    """

    def __init__(self, store: RawRegistryStore, config: Config | None = None, clock: Clock = utc_now) -> None:
        self.store = store
        self.config = config or Config()
        self._clock = clock
        self._lock = threading.RLock()
        self._tables: RegistryTables | None = None
        self._mem_timestamp: datetime | None = None
        # download time of text the store failed to keep
        self._unstored_at: datetime | None = None

    @classmethod
    def from_config(cls, config: Config | None = None) -> RegistryCache:
        """File cache + HTTP download, both driven by `config`."""
        config = config or Config()
        fetcher = HttpFetcher(config.registry_url, config.user_agent, timeout=config.timeout)
        return cls(FileCache(config.cache, fetcher), config)

    # -------------------------------------------------
    # State
    # -------------------------------------------------

    @property
    def mem_timestamp(self) -> datetime | None:
        """Timestamp of the vendor tables held in memory."""
        return self._mem_timestamp

    def source_timestamp(self) -> datetime:
        """
        Update time of the newest registry text seen: the store's, or the
        last download the store could not keep, whichever is later.
        """
        stamp = self.store.current_timestamp()
        if self._unstored_at is not None and self._unstored_at > stamp:
            return self._unstored_at
        return stamp

    def expiration(self) -> datetime:
        return self.source_timestamp() + timedelta(seconds=self.config.ttl_in_seconds)

    def expired(self) -> bool:
        return self._clock() > self.expiration()

    def stale(self) -> bool:
        return self.source_timestamp() != self._mem_timestamp

    def ensure_fresh(self) -> bool:
        """
        Rebuild the tables if the cached registry is expired or stale.
        Returns True when a rebuild happened.
        """
        with self._lock:
            if self.expired():
                self.update(straight=True)
                return True
            if self.stale():
                self.update()
                return True
            return False

    # -------------------------------------------------
    # Update
    # -------------------------------------------------

    def update(self, straight: bool = False) -> datetime:
        """
        Reload the registry and swap in freshly built tables.

        straight=True goes to the network first and falls back to the cache;
        the default goes to the cache first and falls back to the network.
        The previous tables are kept if neither source yields any text.
        """
        with self._lock:
            text = self._fetch_straight() if straight else self._fetch_careful()
            if not text:
                raise InvalidRawData("OUI registry is unavailable from both network and cache")

            tables = build_tables(parse_registry(text))
            self._tables = tables
            self._mem_timestamp = self.source_timestamp()
            logger.info(
                "Loaded %d OUI prefixes (%s update, timestamp %s)",
                len(tables.prefix),
                "straight" if straight else "careful",
                self._mem_timestamp.isoformat(),
            )
            return self._mem_timestamp

    def _fetch_careful(self, fallback: bool = True) -> str:
        text = self._read_cache()
        if text:
            return text
        return self._fetch_straight(fallback=False) if fallback else ""

    def _fetch_straight(self, fallback: bool = True) -> str:
        text = self._download()
        if text:
            return text
        return self._fetch_careful(fallback=False) if fallback else ""

    def _read_cache(self) -> str:
        try:
            return self.store.read() or ""
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Cannot read OUI registry cache: %s", e)
            return ""

    def _download(self) -> str:
        text = self.store.fetch()
        if not text:
            return ""
        try:
            self.store.write(text)
        except (InvalidCache, OSError) as e:
            logger.error("Cannot store OUI registry in cache: %s", e)
            self._unstored_at = self._clock()
        else:
            self._unstored_at = None
        return text

    # -------------------------------------------------
    # Tables
    # -------------------------------------------------

    @property
    def tables(self) -> RegistryTables:
        with self._lock:
            if self._tables is None:
                self.update()
            return self._tables

    @property
    def prefix_table(self) -> dict[str, VendorRecord]:
        return self.tables.prefix

    @property
    def iso_code_table(self) -> dict[str, list[VendorRecord]]:
        return self.tables.iso_code

    @property
    def vendor_table(self) -> dict[str, list[VendorRecord]]:
        return self.tables.vendor

    # -------------------------------------------------
    # Lookup
    # -------------------------------------------------

    def snapshot(self, raising: bool = False) -> RegistryTables | None:
        """
        Tables to serve a lookup or generation from, refreshed first when
        auto_expiration is on. A failed refresh keeps serving the tables
        already in memory; with nothing in memory it returns None
        (InvalidRawData with raising=True).
        """
        try:
            if self.config.auto_expiration:
                self.ensure_fresh()
            return self.tables
        except InvalidRawData:
            if self._tables is not None:
                logger.warning("OUI registry refresh failed, keeping tables from %s", self._mem_timestamp)
                return self._tables
            if raising:
                raise
            logger.error("OUI registry is unavailable, no vendor tables loaded")
            return None

    def lookup(self, mac: Address | int | str, raising: bool = False) -> Address | None:
        """
        Vendor lookup for a MAC address.

        lookup("00:04:A9:6D:B8:AC")
        lookup(20022409388)

        Returns the address with vendor metadata, or None when its prefix is
        unknown (NotFoundOuiVendor with raising=True).
        """
        addr = Address(mac)
        tables = self.snapshot(raising)

        record = tables.prefix.get(addr.prefix) if tables is not None else None
        if record is None:
            if raising:
                raise NotFoundOuiVendor(f"OUI not found for MAC: {mac}")
            return None
        return Address(addr.to_int(), name=record.name, address=record.address, iso_code=record.iso_code)

    def lookup_strict(self, mac: Address | int | str) -> Address:
        return self.lookup(mac, raising=True)
