from __future__ import annotations

import os
from dataclasses import dataclass, replace

DEFAULT_REGISTRY_URL = "https://standards-oui.ieee.org/oui/oui.txt"
DEFAULT_USER_AGENT = "Mozilla/5.0 (X11; Linux x86_64; rv:54.0) Gecko/20100101 Firefox/54.0"
DEFAULT_CACHE = "~/.cache/mac-vendor-registry/oui_*.txt"

ENV_PREFIX = "MAC_VENDOR_REGISTRY_"


@dataclass(frozen=True)
class Config:
    registry_url: str = DEFAULT_REGISTRY_URL
    user_agent: str | None = DEFAULT_USER_AGENT
    # vendor tables expire after one day
    ttl_in_seconds: int = 86_400
    # file pattern for FileCache; ignored when a store is given explicitly
    cache: str = DEFAULT_CACHE
    # when False, expiration is only checked through ensure_fresh()
    auto_expiration: bool = True
    timeout: float = 30

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> Config:
        """
        Defaults overlaid with MAC_VENDOR_REGISTRY_* environment variables:
        URL, USER_AGENT, TTL, CACHE, AUTO_EXPIRATION, TIMEOUT.
        """
        env = os.environ if environ is None else environ

        changes: dict[str, object] = {}
        for suffix, (field_name, convert) in _ENV_FIELDS.items():
            raw = env.get(ENV_PREFIX + suffix)
            if raw is not None:
                changes[field_name] = convert(raw)

        return replace(cls(), **changes)


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


_ENV_FIELDS = {
    "URL": ("registry_url", str),
    "USER_AGENT": ("user_agent", lambda v: v or None),
    "TTL": ("ttl_in_seconds", int),
    "CACHE": ("cache", str),
    "AUTO_EXPIRATION": ("auto_expiration", _parse_bool),
    "TIMEOUT": ("timeout", float),
}
