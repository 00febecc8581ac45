from __future__ import annotations

from typing import List, Optional

import requests

from directory_browser.core.exceptions import LoadFailure
from directory_browser.core.record import Record
from directory_browser.sources.base import RecordSource

DEFAULT_TIMEOUT = 20.0


class HttpRecordSource(RecordSource):
    """
    Fetches the directory as JSON over HTTP(S), e.g. a static `companies.json`.

    A non-2xx status, a network error, a timeout or a body that isn't JSON
    all become LoadFailure. Nothing is retried.
    """

    def __init__(
        self,
        url: str,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.url = url
        self.timeout = timeout
        self.session = session or requests.Session()

    def describe(self) -> str:
        return self.url

    def fetch(self) -> List[Record]:
        try:
            r = self.session.get(self.url, timeout=self.timeout, headers={"Accept": "application/json"})
            r.raise_for_status()
        except requests.RequestException as e:
            raise LoadFailure(f"Failed to load data from {self.url}: {e}") from e

        try:
            payload = r.json()
        except ValueError as e:
            raise LoadFailure(f"Failed to load data from {self.url}: response is not JSON") from e

        return self._parse(payload)
