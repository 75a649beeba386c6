from __future__ import annotations

from dataclasses import dataclass, field, replace

from .parser import VendorRecord


def invert(prefix_table: dict[str, VendorRecord], key: str) -> dict[str, list[VendorRecord]]:
    """
    Group prefix table records by one of their fields.

    Every grouped record carries its prefix table key; bucket order follows
    the prefix table's insertion order. Records whose field is None are left out.
    """
    out: dict[str, list[VendorRecord]] = {}
    for prefix, record in prefix_table.items():
        value = getattr(record, key)
        if value is None:
            continue
        out.setdefault(value, []).append(replace(record, prefix=prefix))
    return out


@dataclass(frozen=True)
class RegistryTables:
    prefix: dict[str, VendorRecord] = field(default_factory=dict)
    iso_code: dict[str, list[VendorRecord]] = field(default_factory=dict)
    vendor: dict[str, list[VendorRecord]] = field(default_factory=dict)


def build_tables(prefix_table: dict[str, VendorRecord]) -> RegistryTables:
    return RegistryTables(
        prefix=prefix_table,
        iso_code=invert(prefix_table, "iso_code"),
        vendor=invert(prefix_table, "name"),
    )
