from __future__ import annotations

from enum import Enum
from typing import Dict, Union

from directory_browser.core.exceptions import InvalidArgument


class SortKey(str, Enum):
    NAME_ASC = "name-asc"
    NAME_DESC = "name-desc"

    @property
    def label(self) -> str:
        return SORT_LABELS[self]

    @property
    def descending(self) -> bool:
        return self is SortKey.NAME_DESC

    @classmethod
    def parse(cls, value: Union[str, SortKey]) -> SortKey:
        """
        Resolve a raw value (e.g. from a dropdown) to a SortKey.

        :raises InvalidArgument: if the value is not a known sort key.
        """
        if isinstance(value, SortKey):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidArgument(f"Unknown sort key: {value!r}") from None


SORT_LABELS: Dict[SortKey, str] = {
    SortKey.NAME_ASC: "Name (A–Z)",
    SortKey.NAME_DESC: "Name (Z–A)",
}
