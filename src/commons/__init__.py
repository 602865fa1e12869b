"""
Extendible commons package.

Subpackages:
  config   - ConfigProvider, YamlConfigProvider; add env/vault by implementing ConfigProvider
  io       - FileReader, FileWriter; add S3/remote stores by implementing these
  llm      - get_llm; add providers by registering a builder

Public API: FileUtils, config, load_config, Constants, configure_logging, get_logger.
"""

from commons.file_utils import FileUtils
from commons.config import config, load_config
from commons.constants import Constants
from commons.logging_utils import configure_logging, get_logger

__all__ = [
    "FileUtils",
    "config",
    "load_config",
    "Constants",
    "configure_logging",
    "get_logger",
]
