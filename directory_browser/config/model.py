from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from directory_browser.core.view_state import DEFAULT_PAGE_SIZE, PageState, ViewState
from directory_browser.sources.base import RecordSource
from directory_browser.sources.http_source import DEFAULT_TIMEOUT, HttpRecordSource
from directory_browser.sources.json_file import JsonFileRecordSource

# ---- Facet options: fixed lists, not derived from the data ----

DEFAULT_LOCATIONS: List[str] = ["New York", "London", "Berlin", "Paris", "Tokyo"]
DEFAULT_INDUSTRIES: List[str] = ["Technology", "Finance", "Healthcare", "Education", "Manufacturing"]
DEFAULT_PAGE_SIZE_CHOICES: List[int] = [6, 9, 12]


@dataclass(frozen=True)
class RecordsSourceConfig:
    """
    Where the directory is read from. Exactly one of `file` / `url` is set.
    """
    file: Optional[Path] = None
    url: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT

    def build_source(self) -> RecordSource:
        if self.url is not None:
            return HttpRecordSource(self.url, timeout=self.timeout)
        return JsonFileRecordSource(self.file)


@dataclass
class DirectoryConfig:
    """
    Parsed `directory.json`.
    """
    config_root: Path
    records: RecordsSourceConfig
    ui_title: str = "Companies Directory"
    subtitle: str = "Building Trust & Careers"
    logo_src: Optional[str] = None
    locations: List[str] = field(default_factory=lambda: list(DEFAULT_LOCATIONS))
    industries: List[str] = field(default_factory=lambda: list(DEFAULT_INDUSTRIES))
    page_size_choices: List[int] = field(default_factory=lambda: list(DEFAULT_PAGE_SIZE_CHOICES))
    default_page_size: int = DEFAULT_PAGE_SIZE
    collation_locale: Optional[str] = None

    def default_view_state(self) -> ViewState:
        return ViewState(page=PageState(page_size=self.default_page_size, page_number=1))
