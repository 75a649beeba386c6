from __future__ import annotations

import logging

import requests

logger = logging.getLogger(__name__)


class HttpFetcher:
    """
    Download the raw IEEE OUI text dump.

    Any transport or HTTP status failure is logged and returned as "".
    """

    def __init__(
        self,
        url: str,
        user_agent: str | None = None,
        timeout: float = 30,
        session: requests.Session | None = None,
    ) -> None:
        self.url = url
        self.user_agent = user_agent
        self.timeout = timeout
        self._session = session or requests.Session()

    def __call__(self) -> str:
        headers = {"User-Agent": self.user_agent} if self.user_agent else {}
        logger.info("Downloading OUI registry from %s", self.url)
        try:
            response = self._session.get(self.url, headers=headers, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.warning("OUI registry download failed: %s", e)
            return ""

        response.encoding = "utf-8"
        text = response.text
        logger.info("Downloaded %d characters of OUI registry", len(text))
        return text
