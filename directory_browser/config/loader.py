from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from directory_browser.config.model import (
    DEFAULT_INDUSTRIES,
    DEFAULT_LOCATIONS,
    DEFAULT_PAGE_SIZE_CHOICES,
    DirectoryConfig,
    RecordsSourceConfig,
)
from directory_browser.core.exceptions import ConfigError
from directory_browser.core.view_state import DEFAULT_PAGE_SIZE
from directory_browser.sources.http_source import DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "directory.json"


def load_config(root: Path | str) -> DirectoryConfig:
    """
    Load configuration from a directory.

    Expected structure:

        root/
            directory.json
            companies.json      (or whatever `records.file` points at)

    Keys of directory.json (all optional except `records`):

    - ui_title, subtitle, logo_src: header text / image
    - records: {"file": "companies.json"} or {"url": "...", "timeout": 20}
    - locations, industries: fixed facet option lists
    - page_size_choices, default_page_size: per-page dropdown
    - collation_locale: system locale used for name sorting (default: built-in)

    Relative `records.file` paths are resolved against the config root.

    :raises FileNotFoundError: if directory.json does not exist.
    :raises ConfigError: if any value is malformed.
    """
    root = Path(root)
    logger.info("Loading directory config", extra={"config_root": str(root)})

    config_path = root / CONFIG_FILENAME
    if not config_path.is_file():
        raise FileNotFoundError(f"File not found at {config_path}")

    try:
        with config_path.open(encoding="utf-8") as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"{config_path} is not valid JSON: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"{config_path} must contain a JSON object")

    records = _parse_records(raw.get("records"), root)

    locations = _string_list(raw, "locations", DEFAULT_LOCATIONS)
    industries = _string_list(raw, "industries", DEFAULT_INDUSTRIES)

    choices = raw.get("page_size_choices", DEFAULT_PAGE_SIZE_CHOICES)
    if (
        not isinstance(choices, list)
        or not choices
        or not all(isinstance(c, int) and not isinstance(c, bool) and c > 0 for c in choices)
    ):
        raise ConfigError("page_size_choices must be a non-empty list of positive integers")

    default_page_size = raw.get("default_page_size", DEFAULT_PAGE_SIZE)
    if default_page_size not in choices:
        raise ConfigError(
            f"default_page_size {default_page_size!r} must be one of page_size_choices {choices}"
        )

    cfg = DirectoryConfig(
        config_root=root,
        records=records,
        ui_title=raw.get("ui_title", "Companies Directory"),
        subtitle=raw.get("subtitle", "Building Trust & Careers"),
        logo_src=raw.get("logo_src"),
        locations=locations,
        industries=industries,
        page_size_choices=list(choices),
        default_page_size=default_page_size,
        collation_locale=raw.get("collation_locale"),
    )

    logger.info(
        "Directory config loaded",
        extra={
            "config_root": str(root),
            "records_source": str(records.url or records.file),
            "n_locations": len(locations),
            "n_industries": len(industries),
        },
    )
    return cfg


def _parse_records(raw_records: Any, root: Path) -> RecordsSourceConfig:
    if not isinstance(raw_records, dict):
        raise ConfigError("'records' must be an object with either 'file' or 'url'")

    file_raw = raw_records.get("file")
    url = raw_records.get("url")
    if (file_raw is None) == (url is None):
        raise ConfigError("'records' must set exactly one of 'file' or 'url'")

    timeout = raw_records.get("timeout", DEFAULT_TIMEOUT)
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
        raise ConfigError(f"records.timeout must be a positive number, got {timeout!r}")

    if url is not None:
        if not isinstance(url, str) or not url.startswith(("http://", "https://")):
            raise ConfigError(f"records.url must be an http(s) URL, got {url!r}")
        return RecordsSourceConfig(url=url, timeout=float(timeout))

    # Absolute paths are used as-is; relative ones resolve against the config root
    file_path = Path(file_raw)
    if not file_path.is_absolute():
        file_path = (root / file_path).resolve()
    return RecordsSourceConfig(file=file_path, timeout=float(timeout))


def _string_list(raw: Dict[str, Any], key: str, default: List[str]) -> List[str]:
    values = raw.get(key, default)
    if not isinstance(values, list) or not all(isinstance(v, str) and v for v in values):
        raise ConfigError(f"{key} must be a list of non-empty strings")
    return list(values)
