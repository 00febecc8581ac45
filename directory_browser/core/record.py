from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

CORE_FIELDS = ("name", "location", "industry")


@dataclass(frozen=True)
class Record:
    """
    A single organisation in the directory.

    Only name, location and industry are read by the pipeline. Any other
    attributes from the source payload are kept in `extra` and passed
    through to the UI untouched.
    """
    name: str
    location: str
    industry: str
    extra: Dict[str, Any] = field(default_factory=dict, hash=False)

    def to_dict(self) -> Dict[str, Any]:
        data = dict(self.extra)
        data.update(name=self.name, location=self.location, industry=self.industry)
        return data
