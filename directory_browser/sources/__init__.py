"""
Record sources: where the raw directory collection is read from.
"""

from .base import RecordSource, StaticRecordSource
from .json_file import JsonFileRecordSource
from .http_source import HttpRecordSource

__all__ = ["RecordSource", "StaticRecordSource", "JsonFileRecordSource", "HttpRecordSource"]
