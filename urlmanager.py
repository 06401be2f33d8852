"""URL manager: parse a query string into toggleable parameters and back.

A URLManager owns its parameter list exclusively. It provides no locking;
callers sharing one instance across threads must serialize access.
"""
import numbers
from typing import Iterator, List, Optional

from config_loader import ManagerConfig, get_config
from errors import (
    ArgumentTypeError, ArityError, ConstructionError, InvalidArgumentError,
    OccurrenceRangeError, QueryParseError, type_line,
)
from logging_setup import get_logger
from parameter import URLParameter
from urlnorm import decode_component, decode_uri, encode_component, split_pair, split_url

logger = get_logger("urlmanager")


def _require_str(method: str, **values) -> None:
    bad = {name: value for name, value in values.items() if not isinstance(value, str)}
    if not bad:
        return
    error = ArgumentTypeError(f"{method}() expects {', '.join(values)} to be strings.")
    for name, value in bad.items():
        error.add_line(type_line(name, value))
    raise error


class URLManager:
    """
    Manages the query parameters of one URL.

    Attributes:
        url: Decoded base path (query string stripped)
        params: Parameters in output order
        config: Parsing/mutation behaviour
    """

    def __init__(self, url: str, config: Optional[ManagerConfig] = None):
        if not isinstance(url, str):
            error = ConstructionError()
            error.add_line("'url' is expected to be a string.")
            error.add_line(type_line("url", url))
            raise error

        self.config = config if config is not None else get_config()
        self.params: List[URLParameter] = []

        base, query = split_url(url)
        self.url = decode_uri(base)
        if query is not None:
            self._parse_query(query)

    def _parse_query(self, query: str) -> None:
        pairs = [pair for pair in query.split("&") if pair]
        if self.config.parsing.order == "reverse":
            pairs.reverse()

        for pair in pairs:
            key, value, has_separator = split_pair(pair)
            if not has_separator:
                if self.config.parsing.malformed_pairs == "strict":
                    raise QueryParseError(pair)
                logger.warning("query_pair_malformed", pair=pair)
            self.params.append(URLParameter(decode_component(key), decode_component(value)))

        logger.debug("query_parsed", base=self.url, params=len(self.params),
                     order=self.config.parsing.order)

    def add_param(self, *parameters: URLParameter) -> None:
        """
        Append one or more parameters.

        Raises:
            ArityError: no arguments given (list unchanged)
            InvalidArgumentError: an argument is not a URLParameter. Unless
                mutation.atomic_add is set, arguments before it stay appended.
        """
        if not parameters:
            raise ArityError("add_param")

        if self.config.mutation.atomic_add:
            for position, parameter in enumerate(parameters, 1):
                if not isinstance(parameter, URLParameter):
                    raise InvalidArgumentError(parameter, position)
            self.params.extend(parameters)
        else:
            for position, parameter in enumerate(parameters, 1):
                if not isinstance(parameter, URLParameter):
                    # Earlier arguments are not rolled back
                    raise InvalidArgumentError(parameter, position)
                self.params.append(parameter)

        logger.debug("params_added", count=len(parameters))

    def get_param(self, key: str, occurrence: int = 1) -> Optional[URLParameter]:
        """
        Return the occurrence-th (1-indexed) parameter with this key, or None.

        occurrence may be any real number except bool. An integral float
        such as 2.0 counts like 2; a fractional one never matches.
        """
        _require_str("get_param", key=key)
        if isinstance(occurrence, bool) or not isinstance(occurrence, numbers.Real):
            error = ArgumentTypeError("get_param() expects occurrence to be a number.")
            error.add_line(type_line("occurrence", occurrence))
            raise error
        if occurrence < 1:
            raise OccurrenceRangeError(occurrence)

        seen = 0
        for parameter in self.params:
            if parameter.key == key:
                seen += 1
                if seen == occurrence:
                    return parameter
        return None

    def get_params(self, key: str) -> List[URLParameter]:
        """Return all parameters with this key, in list order."""
        _require_str("get_params", key=key)
        return [parameter for parameter in self.params if parameter.key == key]

    def update_param(self, key: str, value: str) -> Optional[URLParameter]:
        """Set the value of the first parameter with this key. None if absent."""
        _require_str("update_param", key=key, value=value)
        parameter = self.get_param(key)
        if parameter is not None:
            parameter.value = value
            logger.debug("param_updated", key=key)
        return parameter

    def upsert_param(self, key: str, value: str) -> URLParameter:
        """Update the first parameter with this key, or append a new one."""
        _require_str("upsert_param", key=key, value=value)
        parameter = self.update_param(key, value)
        if parameter is None:
            parameter = URLParameter(key, value)
            self.add_param(parameter)
            logger.debug("param_inserted", key=key)
        return parameter

    def generate_url(self) -> str:
        """
        Build the URL from the base path and the enabled parameters.

        Always emits '?', even when no parameter is enabled.
        """
        query = "&".join(
            f"{encode_component(p.key)}={encode_component(p.value)}"
            for p in self.params
            if p.enabled
        )
        url = f"{self.url}?{query}"
        logger.debug("url_generated", url=url)
        return url

    def __len__(self) -> int:
        return len(self.params)

    def __iter__(self) -> Iterator[URLParameter]:
        return iter(self.params)

    def __repr__(self) -> str:
        return f"URLManager({self.url!r}, {len(self.params)} params)"
