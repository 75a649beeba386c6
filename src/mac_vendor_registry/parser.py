from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from .address import Address

logger = logging.getLogger(__name__)

_TABS = re.compile(r"\t+")
_SPACES = re.compile(r"\s+")
_TIGHT_SEPARATOR = re.compile(r"[,;](?!\s|$)")
_TRAILING_SEPARATORS = re.compile(r"[\s,;]+$")
_PREFIX = re.compile(r"^[0-9A-Fa-f]{6}$")


@dataclass(frozen=True)
class VendorRecord:
    prefix: str
    name: str
    address: tuple[str, ...] = ()
    iso_code: str | None = None


def normalize_field(text: str) -> str:
    """
    Tidy a registry name or address line.

    "  ACME  corp;Ltd," -> "ACME corp, Ltd"
    """
    s = _SPACES.sub(" ", text.strip())
    s = _TRAILING_SEPARATORS.sub("", s)
    s = _TIGHT_SEPARATOR.sub(", ", s)
    return s[:1].upper() + s[1:]


def split_blocks(text: str) -> list[str]:
    """
    Split a raw IEEE OUI dump into vendor blocks, header block excluded.
    """
    raw = _TABS.sub("\t", text.replace("\r\n", "\n"))
    return raw.split("\n\n")[1:]


def parse_block(block: str) -> VendorRecord | None:
    """
    Parse one vendor block:

        E0-43-DB   (hex)\tShenzhen ViewAt Technology Co.,Ltd.
        E043DB     (base 16)\tShenzhen ViewAt Technology Co.,Ltd.
        \t9A,Microprofit,6th Gaoxin South...
        \tshenzhen  guangdong  518057
        \tCN

    Returns None for blocks that do not carry a base 16 line.
    """
    lines = block.strip().split("\n")
    if len(lines) < 2:
        return None

    base16_fields = lines[1].split("\t")
    token = base16_fields[0].strip()[:6]
    if not _PREFIX.match(token):
        return None

    address = block.strip().replace("\t", "").split("\n")
    iso_code = address[-1].strip()

    return VendorRecord(
        prefix=Address(token).prefix,
        name=normalize_field(base16_fields[-1]),
        address=tuple(normalize_field(line) for line in address[2:]),
        iso_code=iso_code.upper() if len(iso_code) == 2 else None,
    )


def parse_registry(text: str) -> dict[str, VendorRecord]:
    """
    Build the prefix table from a raw IEEE OUI dump.

    The first record for a prefix wins; later duplicates are ignored.
    Malformed blocks are skipped with a warning.
    """
    table: dict[str, VendorRecord] = {}
    skipped = 0

    for block in split_blocks(text):
        if not block.strip():
            continue

        record = parse_block(block)
        if record is None:
            skipped += 1
            logger.warning("Skipping malformed registry block: %r", block.strip()[:80])
            continue

        if record.prefix in table:
            logger.debug("Ignoring duplicate prefix %s (%s)", record.prefix, record.name)
            continue
        table[record.prefix] = record

    logger.debug("Parsed %d vendor records (%d skipped)", len(table), skipped)
    return table
