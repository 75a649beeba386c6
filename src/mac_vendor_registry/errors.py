from __future__ import annotations


class RegistryError(Exception):
    """Base class for every error raised by mac_vendor_registry."""


class InvalidAddress(RegistryError, ValueError):
    """Malformed or out-of-range MAC address."""


class InvalidCache(RegistryError):
    """Cache location is unusable (e.g. its directory does not exist)."""


class InvalidRawData(RegistryError):
    """Neither the network nor the cache produced registry text."""


class InvalidOptions(RegistryError, ValueError):
    """Unsupported option given to address generation."""


class NotFoundOuiVendor(RegistryError, LookupError):
    """No registry record matches the requested address, vendor or country."""
