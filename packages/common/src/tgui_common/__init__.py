"""tgui common - 함수 합성 유틸리티"""
import logging

from tgui_common.types import (
    Step, StepFn, Iteratee, Collection, LogLevel,
)
from tgui_common.result import (
    Result, Success, Failure,
    bind, unwrap_or_else,
)
from tgui_common.errors import (
    UnsupportedCollectionError, ConfigError,
    runtime_type_name, error_to_dict,
)
from tgui_common.config import (
    MapConfig, LoggingConfig, CommonConfig,
    load_yaml, parse_config, load_config, merge_config, get_config,
)
from tgui_common.log import setup_logging
from tgui_common.fp import (
    flow, compose, map, identity,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Types
    "Step", "StepFn", "Iteratee", "Collection", "LogLevel",
    # Result
    "Result", "Success", "Failure", "bind", "unwrap_or_else",
    # Errors
    "UnsupportedCollectionError", "ConfigError",
    "runtime_type_name", "error_to_dict",
    # Config
    "MapConfig", "LoggingConfig", "CommonConfig",
    "load_yaml", "parse_config", "load_config", "merge_config", "get_config",
    # Logging
    "setup_logging",
    # Functional
    "flow", "compose", "map", "identity",
]
