from .model import DirectoryConfig, RecordsSourceConfig
from .loader import load_config

__all__ = ["DirectoryConfig", "RecordsSourceConfig", "load_config"]
