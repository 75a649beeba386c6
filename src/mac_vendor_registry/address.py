from __future__ import annotations

import re
from collections.abc import Iterable
from functools import total_ordering

from .errors import InvalidAddress

MAX_VALUE = 2**48 - 1

_HEX_PREFIX = re.compile(r"^0X")
_NON_HEX = re.compile(r"[^0-9A-F]")


def cleanup(mac: str) -> str:
    """
    Reduce any textual MAC form to 12 uppercase hex digits.

    "aa-bb-cc" -> "AABBCC000000", "0x0004a96db8ac" -> "0004A96DB8AC"
    """
    m = _HEX_PREFIX.sub("", mac.strip().upper())
    return _NON_HEX.sub("", m).ljust(12, "0")


@total_ordering
class Address:
    """
    48-bit MAC address with optional vendor metadata.

    Accepts another Address (value and metadata are copied), an int or a
    string in any common notation (colons, dashes, dots, none, 0x prefix).
    """

    __slots__ = ("_value", "_name", "_address", "_iso_code")

    def __init__(
        self,
        source: Address | int | str,
        name: str | None = None,
        address: Iterable[str] | None = None,
        iso_code: str | None = None,
    ) -> None:
        src_name = src_address = src_iso = None

        if isinstance(source, Address):
            value = source.to_int()
            src_name, src_address, src_iso = source.name, source.address, source.iso_code
        elif isinstance(source, int) and not isinstance(source, bool):
            value = source
        elif isinstance(source, str):
            value = int(cleanup(source), 16)
        else:
            raise InvalidAddress(
                f"Incompatible type for address initialization: {type(source).__name__}"
            )

        if not 0 <= value <= MAX_VALUE:
            raise InvalidAddress(f"Invalid MAC address: {source!r}")

        self._value = value
        self._name = src_name if src_name is not None else name
        if src_address is not None:
            self._address = src_address
        else:
            self._address = tuple(address) if address is not None else None
        self._iso_code = src_iso if src_iso is not None else iso_code

    # -------------------------------------------------
    # Metadata
    # -------------------------------------------------

    @property
    def value(self) -> int:
        return self._value

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def address(self) -> tuple[str, ...] | None:
        return self._address

    @property
    def iso_code(self) -> str | None:
        return self._iso_code

    @property
    def full_address(self) -> str:
        return ", ".join(self._address or ())

    # -------------------------------------------------
    # Representation
    # -------------------------------------------------

    def to_int(self) -> int:
        return self._value

    def to_str(self, sep: str = ":") -> str:
        digits = f"{self._value:012X}"
        return sep.join(digits[i : i + 2] for i in range(0, 12, 2))

    @property
    def prefix(self) -> str:
        return self.to_str("")[:6]

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __str__(self) -> str:
        return self.to_str()

    def __repr__(self) -> str:
        if self._name is None:
            return f"Address('{self}')"
        return f"Address('{self}', name={self._name!r})"

    # -------------------------------------------------
    # Comparison
    # -------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Address):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: Address) -> bool:
        if not isinstance(other, Address):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash(self._value)

    # -------------------------------------------------
    # Address classes
    # -------------------------------------------------

    @property
    def is_oui(self) -> bool:
        return self._name is not None

    @property
    def is_broadcast(self) -> bool:
        return self._value == MAX_VALUE

    @property
    def is_multicast(self) -> bool:
        # I/G bit: least significant bit of the first octet
        return bool((1 << 40) & self._value)

    @property
    def is_unicast(self) -> bool:
        return not self.is_multicast

    @property
    def is_local_admin(self) -> bool:
        # U/L bit: second least significant bit of the first octet
        return bool((2 << 40) & self._value)

    @property
    def is_global_uniq(self) -> bool:
        return not self.is_local_admin

    def next(self) -> Address:
        """Following address, wrapping to 00:00:00:00:00:00. Metadata is dropped."""
        return Address((self._value + 1) % (MAX_VALUE + 1))

    succ = next
