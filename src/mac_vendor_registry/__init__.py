from __future__ import annotations

from .address import Address
from .cache import RegistryCache
from .config import Config
from .errors import (
    InvalidAddress,
    InvalidCache,
    InvalidOptions,
    InvalidRawData,
    NotFoundOuiVendor,
    RegistryError,
)
from .fetch import HttpFetcher
from .generator import AddressGenerator
from .parser import VendorRecord, parse_registry
from .store import CallbackCache, FileCache, RawRegistryStore
from .tables import RegistryTables, build_tables, invert

__all__ = [
    "Address",
    "AddressGenerator",
    "CallbackCache",
    "Config",
    "FileCache",
    "HttpFetcher",
    "InvalidAddress",
    "InvalidCache",
    "InvalidOptions",
    "InvalidRawData",
    "NotFoundOuiVendor",
    "RawRegistryStore",
    "RegistryCache",
    "RegistryError",
    "RegistryTables",
    "VendorRecord",
    "build_tables",
    "invert",
    "parse_registry",
]
