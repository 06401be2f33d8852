"""Query manager package."""
from urlmanager import URLManager
from parameter import URLParameter
from errors import (
    URLManagerError, ConstructionError, QueryParseError, ArgumentTypeError,
    ArityError, InvalidArgumentError, OccurrenceRangeError, format_error,
)
from urlnorm import decode_uri, decode_component, encode_component
from config_loader import ManagerConfig, ParsingConfig, MutationConfig, ConfigLoader, get_config

__all__ = [
    "URLManager", "URLParameter",
    "URLManagerError", "ConstructionError", "QueryParseError", "ArgumentTypeError",
    "ArityError", "InvalidArgumentError", "OccurrenceRangeError", "format_error",
    "decode_uri", "decode_component", "encode_component",
    "ManagerConfig", "ParsingConfig", "MutationConfig", "ConfigLoader", "get_config",
]
