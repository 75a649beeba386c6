from __future__ import annotations

import random

from .address import MAX_VALUE, Address
from .cache import RegistryCache
from .errors import InvalidOptions, NotFoundOuiVendor
from .parser import VendorRecord


class AddressGenerator:
    """
    Random MAC addresses, optionally drawn from a vendor's or a country's
    registered prefixes.

        gen = AddressGenerator(cache)
        gen.generate()
        gen.generate(vendor=True)
        gen.generate(vendor="IEEE Registration Authority")
        gen.generate(iso_code="cn")
    """

    def __init__(self, cache: RegistryCache, rng: random.Random | None = None) -> None:
        self.cache = cache
        self.rng = rng or random.Random()

    def generate(
        self,
        iso_code: str | None = None,
        vendor: bool | str | None = None,
        raising: bool = False,
    ) -> Address | None:
        if iso_code is not None and not isinstance(iso_code, str):
            raise InvalidOptions(f"Incompatible option iso_code for generate: {type(iso_code).__name__}")
        if vendor is not None and not isinstance(vendor, (bool, str)):
            raise InvalidOptions(f"Incompatible option vendor for generate: {type(vendor).__name__}")

        if iso_code is None and vendor in (None, False):
            return Address(self.rng.randint(0, MAX_VALUE))

        tables = self.cache.snapshot(raising)
        if tables is None:
            return None

        if iso_code is not None:
            return self._by_iso_code(tables.iso_code, iso_code.upper(), raising)

        if vendor is True:
            if not tables.prefix:
                return self._not_found("OUI registry is empty", raising)
            vendor = tables.prefix[self.rng.choice(list(tables.prefix))].name

        return self._by_vendor(tables.vendor, vendor, raising)

    def generate_strict(self, iso_code: str | None = None, vendor: bool | str | None = None) -> Address:
        return self.generate(iso_code=iso_code, vendor=vendor, raising=True)

    def _by_vendor(self, vendor_table: dict[str, list[VendorRecord]], vendor: str, raising: bool) -> Address | None:
        records = vendor_table.get(vendor)
        if not records:
            return self._not_found(f"OUI not found for vendor: {vendor}", raising)
        record = self.rng.choice(records)
        # keep the vendor name as asked for, not the record's
        return Address(self._draw(record), name=vendor, address=record.address, iso_code=record.iso_code)

    def _by_iso_code(self, iso_code_table: dict[str, list[VendorRecord]], iso_code: str, raising: bool) -> Address | None:
        records = iso_code_table.get(iso_code)
        if not records:
            return self._not_found(f"OUI not found for iso code: {iso_code}", raising)
        record = self.rng.choice(records)
        return Address(self._draw(record), name=record.name, address=record.address, iso_code=iso_code)

    def _draw(self, record: VendorRecord) -> int:
        return Address(record.prefix).to_int() + self.rng.getrandbits(24)

    @staticmethod
    def _not_found(message: str, raising: bool) -> None:
        if raising:
            raise NotFoundOuiVendor(message)
        return None
