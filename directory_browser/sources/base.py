from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, List

from directory_browser.core.exceptions import LoadFailure
from directory_browser.core.record import Record
from directory_browser.validation.errors import ValidationError
from directory_browser.validation.record_validation import records_from_payload

logger = logging.getLogger(__name__)


class RecordSource(ABC):
    """
    Abstract interface for wherever the directory comes from (file, HTTP, ...).

    `fetch` is called once per session by RecordStore.load.
    """

    @abstractmethod
    def fetch(self) -> List[Record]:
        """
        Return the full record collection.

        :raises LoadFailure: if the source is unreachable or the payload is malformed.
        """
        pass

    @abstractmethod
    def describe(self) -> str:
        """Short human-readable location of the source, for logs."""
        pass

    def _parse(self, payload: Any) -> List[Record]:
        try:
            return records_from_payload(payload)
        except ValidationError as e:
            logger.warning(
                "Record payload failed validation",
                extra={"source": self.describe(), "issues": e.codes},
            )
            raise LoadFailure(f"Malformed record payload from {self.describe()}: {e}") from e


class StaticRecordSource(RecordSource):
    """
    In-memory source, mostly for tests and demos.
    """

    def __init__(self, payload: Any):
        self.payload = payload

    def fetch(self) -> List[Record]:
        return self._parse(self.payload)

    def describe(self) -> str:
        return "<static>"
