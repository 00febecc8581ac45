from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from directory_browser.config.model import DirectoryConfig
from directory_browser.core.coordinator import ViewStateCoordinator
from directory_browser.core.record_store import RecordStore
from directory_browser.core.stage_cache import StageCache


@dataclass
class AppConfig:
    directory_config: DirectoryConfig
    store: RecordStore
    cache: StageCache = field(default_factory=StageCache)

    def coordinator(self, view_state: Optional[Dict[str, Any]] = None) -> ViewStateCoordinator:
        """
        Rebuild the session coordinator from the dict kept in the browser.

        Dash callbacks are stateless, so every callback restores one; the shared
        StageCache keeps filter/sort work from being repeated across callbacks.
        """
        return ViewStateCoordinator.restore(
            self.store,
            view_state,
            defaults=self.directory_config.default_view_state(),
            page_size_choices=self.directory_config.page_size_choices,
            cache=self.cache,
        )
