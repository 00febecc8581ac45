from __future__ import annotations

import logging
import uuid
from enum import Enum
from typing import Iterable, Optional, Tuple, TYPE_CHECKING

from directory_browser.core.exceptions import LoadFailure, RecordStoreError
from directory_browser.core.record import Record

if TYPE_CHECKING:
    from directory_browser.sources.base import RecordSource

logger = logging.getLogger(__name__)


class StoreStatus(str, Enum):
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


class RecordStore:
    """
    Holds the raw record collection for the whole session.

    The store is filled exactly once. A failed load leaves it empty for good
    and keeps the error message so the UI can show it. `token` changes when
    the store resolves, which lets derived-view caches tell collections apart.
    """

    def __init__(self) -> None:
        self._records: Tuple[Record, ...] = ()
        self._status = StoreStatus.LOADING
        self._error: Optional[str] = None
        self._token: Optional[str] = None

    @classmethod
    def from_records(cls, records: Iterable[Record]) -> RecordStore:
        store = cls()
        store._resolve(tuple(records), error=None)
        return store

    # -------------------------------------------------------------------------
    # Read-only access
    # -------------------------------------------------------------------------
    @property
    def records(self) -> Tuple[Record, ...]:
        return self._records

    @property
    def status(self) -> StoreStatus:
        return self._status

    @property
    def loading(self) -> bool:
        return self._status is StoreStatus.LOADING

    @property
    def error(self) -> Optional[str]:
        return self._error

    @property
    def token(self) -> Optional[str]:
        return self._token

    def __len__(self) -> int:
        return len(self._records)

    # -------------------------------------------------------------------------
    # One-shot load
    # -------------------------------------------------------------------------
    def load(self, source: RecordSource) -> None:
        """
        Fetch the collection from `source` and resolve the store.

        A LoadFailure is recorded, not raised: the session carries on with an
        empty collection and an error message. There is no retry.

        :raises RecordStoreError: if the store has already been resolved.
        """
        if self._status is not StoreStatus.LOADING:
            raise RecordStoreError(f"Record store already {self._status.value}; it is loaded once per session")

        logger.info("Loading records", extra={"source": source.describe()})

        try:
            records = tuple(source.fetch())
        except LoadFailure as e:
            logger.error(
                "Record source failed; continuing with an empty directory",
                extra={"source": source.describe(), "error": str(e)},
            )
            self._resolve((), error=str(e) or "Error")
            return

        self._resolve(records, error=None)
        logger.info(
            "Records loaded",
            extra={"source": source.describe(), "n_records": len(records)},
        )

    def _resolve(self, records: Tuple[Record, ...], error: Optional[str]) -> None:
        self._records = records
        self._error = error
        self._status = StoreStatus.FAILED if error is not None else StoreStatus.READY
        # token last: a reader that sees the new token sees the whole resolved store
        self._token = uuid.uuid4().hex
