from __future__ import annotations

import json
from pathlib import Path
from typing import List

from directory_browser.core.exceptions import LoadFailure
from directory_browser.core.record import Record
from directory_browser.sources.base import RecordSource


class JsonFileRecordSource(RecordSource):
    """
    Reads the directory from a local JSON file (an array of company objects).
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def describe(self) -> str:
        return str(self.path)

    def fetch(self) -> List[Record]:
        if not self.path.is_file():
            raise LoadFailure(f"Failed to load data: file not found at {self.path}")

        try:
            with self.path.open(encoding="utf-8") as f:
                payload = json.load(f)
        except json.JSONDecodeError as e:
            raise LoadFailure(f"Failed to load data: {self.path} is not valid JSON ({e})") from e
        except OSError as e:
            raise LoadFailure(f"Failed to load data: {e}") from e

        return self._parse(payload)
