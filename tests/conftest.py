from __future__ import annotations

from datetime import UTC, datetime

import pytest

from mac_vendor_registry.cache import RegistryCache
from mac_vendor_registry.config import Config
from mac_vendor_registry.store import CallbackCache

NOW = datetime(2026, 10, 18, 12, 0, tzinfo=UTC)

REGISTRY = (
    "OUI/MA-L\t\t\t\t\t\t\t\tOrganization\n"
    "company_id\t\t\t\t\t\t\t\tOrganization\n"
    "\t\t\t\t\t\t\t\tAddress\n"
    "\n"
    "E0-43-DB   (hex)\t\tShenzhen ViewAt Technology Co.,Ltd.\n"
    "E043DB     (base 16)\t\tShenzhen ViewAt Technology Co.,Ltd.\n"
    "\t\t\t\t9A,Microprofit,6th Gaoxin South Road, High-Tech Industrial Park, Nanshan, Shenzhen, CHINA.\n"
    "\t\t\t\tshenzhen  guangdong  518057\n"
    "\t\t\t\tCN\n"
    "\n"
    "2C-30-33   (hex)\t\tNETGEAR\n"
    "2C3033     (base 16)\t\tNETGEAR\n"
    "\t\t\t\t350 East Plumeria Drive\n"
    "\t\t\t\tSan Jose  CA  95134\n"
    "\t\t\t\tUS\n"
    "\n"
    "24-05-F5   (hex)\t\tIntegrated Device Technology (Malaysia) Sdn. Bhd.\n"
    "2405F5     (base 16)\t\tIntegrated Device Technology (Malaysia) Sdn. Bhd.\n"
    "\t\t\t\tPhase 3, Bayan Lepas FIZ\n"
    "\t\t\t\tBayan Lepas  Penang  11900\n"
    "\t\t\t\tMY\n"
    "\n"
    "AC-DE-48   (hex)\t\tPrivate\n"
    "ACDE48     (base 16)\t\tPrivate\n"
    "\n"
    "2C-30-33   (hex)\t\tDuplicate Corp\n"
    "2C3033     (base 16)\t\tDuplicate Corp\n"
    "\t\t\t\t1 Nowhere Road\n"
    "\t\t\t\tDE\n"
    "\n"
    "A0-63-91   (hex)\t\tNETGEAR\n"
    "A06391     (base 16)\t\tNETGEAR\n"
    "\t\t\t\t350 East Plumeria Drive\n"
    "\t\t\t\tSan Jose  CA  95134\n"
    "\t\t\t\tUS\n"
    "\n"
)


class FakeClock:
    def __init__(self, now: datetime = NOW) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


class FakeFetcher:
    def __init__(self, text: str = REGISTRY) -> None:
        self.text = text
        self.calls = 0

    def __call__(self) -> str:
        self.calls += 1
        return self.text


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def fetcher() -> FakeFetcher:
    return FakeFetcher()


@pytest.fixture
def memory() -> dict[str, str | None]:
    return {"text": None}


@pytest.fixture
def store(fetcher, memory, clock) -> CallbackCache:
    def write(text: str) -> None:
        memory["text"] = text

    return CallbackCache(lambda: memory["text"], write, fetcher, clock=clock)


@pytest.fixture
def cache(store, clock) -> RegistryCache:
    return RegistryCache(store, Config(), clock=clock)


@pytest.fixture
def registry_text() -> str:
    return REGISTRY
