"""
URL Builder Module

Combines a validated base address with an ordered multi-valued parameter set
into one absolute URL, and renders parameter sets as query strings.

Every function here is pure: inputs are never mutated and nothing is cached
between calls.
"""

from collections.abc import Mapping
from typing import Any, Union
from urllib.parse import quote_plus

from .address import Address, url_problem, validate_address
from .events import UrlEvents
from .exceptions import InvalidParameters, MalformedResult
from .log_config import get_context_logger
from .params import ParameterSet
from .settings import get_settings
from .types import EndpointConfig


logger = get_context_logger("miscutils.url_builder")

ParamsLike = Union[ParameterSet, Mapping[str, Any]]


def percent_encode(value: str | None) -> str:
    """
    Form-encode a single value using the configured character encoding.

    Space becomes ``+``. ASCII letters, digits and ``. - _ * ~`` are kept,
    every other character is written as ``%XX`` escapes of its encoded bytes.
    Characters the encoding cannot represent are written as ``?`` (``%3F``).
    ``~`` stays literal as an RFC 3986 unreserved character, although some
    form encoders escape it to ``%7E``.

    Args:
        value: Value to encode; None is treated as an empty string

    Returns:
        str: The encoded value

    Examples:
        >>> percent_encode("a b&c")
        'a+b%26c'
        >>> percent_encode(None)
        ''
    """
    if value is None:
        return ""
    return quote_plus(
        value, safe="*", encoding=get_settings().default_encoding, errors="replace"
    )


def render_query_string(params: ParamsLike | None) -> str:
    """
    Render a parameter set as a percent-encoded query string.

    Names and their values are written in insertion order as repeated
    ``name=value`` pairs joined by ``&``. Values are stripped of surrounding
    whitespace and then encoded; names are written as given. None values are
    skipped. No leading ``?`` or ``&`` is written, since only the caller knows
    which separator is required.

    Args:
        params: ParameterSet or mapping of name to value list

    Returns:
        str: The query string, empty when there is nothing to render

    Raises:
        InvalidParameters: If ``params`` is None
    """
    parameter_set = ParameterSet.coerce(params)
    return "&".join(
        f"{name}={percent_encode(str(value).strip())}"
        for name, values in parameter_set.items()
        for value in values
        if value is not None
    )


def write_params_as_querystring(params: ParamsLike | None) -> str:
    """
    Render a parameter set as a decoded, human-readable query string.

    Same ordering and None handling as ``render_query_string``, but values
    are neither stripped nor encoded. Intended for diagnostics.

    Raises:
        InvalidParameters: If ``params`` is None
    """
    parameter_set = ParameterSet.coerce(params)
    return "&".join(
        f"{name}={value}"
        for name, values in parameter_set.items()
        for value in values
        if value is not None
    )


def build_url(address: str | Address | None, params: ParamsLike | None) -> str:
    """
    Create a properly parameterized URL.

    The address is validated and normalized first. When the rendered query
    string is non-empty it is appended after ``&`` if the address already has
    a query, otherwise after ``?``. A fragment on the address stays at the end.

    Args:
        address: Base address string or Address
        params: ParameterSet or mapping of name to value list; may be empty

    Returns:
        str: The assembled absolute URL

    Raises:
        InvalidAddress: If the address is absent or not a valid URL
        InvalidParameters: If ``params`` is None
        MalformedResult: If the assembled string is not a valid URL

    Examples:
        >>> build_url("http://example.com/path?x=1", {"y": ["2"]})
        'http://example.com/path?x=1&y=2'
    """
    base = validate_address(address)

    if params is None:
        logger.warning(UrlEvents.PARAMS_REJECTED.value, address=base.uri, reason="missing")
        raise InvalidParameters(
            "Parameter set not permitted to be None", argument="params"
        )

    parameter_set = ParameterSet.coerce(params)
    query = render_query_string(parameter_set)

    url = base.uri
    if query:
        hierarchy, hash_mark, fragment = url.partition("#")
        separator = "&" if hierarchy.find("?") > 0 else "?"
        url = f"{hierarchy}{separator}{query}{hash_mark}{fragment}"

    problem = url_problem(url)
    if problem:
        readable = write_params_as_querystring(parameter_set)
        logger.warning(UrlEvents.BUILD_FAILED.value, url=url, params=readable, reason=problem)
        raise MalformedResult(
            f"Parameters resolve to a malformed URL: {problem}; params: {readable}",
            url=url,
            params=params,
        )

    logger.debug(UrlEvents.BUILD_COMPLETED.value, url=url, param_count=len(parameter_set))
    return url


class Endpoint:
    """
    A validated base address with base parameters.

    Each ``build`` call merges the base parameters with call-specific ones and
    delegates to ``build_url``. Endpoints are never modified in place;
    ``with_params`` returns a new one.
    """

    def __init__(
        self,
        base_url: str | Address | None,
        base_params: ParamsLike | None = None,
    ):
        """
        Initialize endpoint.

        Args:
            base_url: Base address, validated and normalized here
            base_params: Parameters included in every built URL

        Raises:
            InvalidAddress: If ``base_url`` is not a valid URL
        """
        self._address = validate_address(base_url)
        self._base_params = (
            ParameterSet() if base_params is None else ParameterSet.coerce(base_params).copy()
        )

    @property
    def address(self) -> Address:
        return self._address

    @property
    def base_params(self) -> ParameterSet:
        """A copy of the base parameters; changing it leaves the endpoint alone."""
        return self._base_params.copy()

    @property
    def base_url(self) -> str:
        return self._address.uri

    def build(self, additional_params: ParamsLike | None = None) -> str:
        """
        Build the full URL with base and additional parameters.

        Additional values for a name already among the base parameters are
        written after the base values.

        Args:
            additional_params: Call-specific parameters

        Returns:
            str: Full URL
        """
        return build_url(self._address, self._base_params.merged(additional_params))

    def with_params(self, params: ParamsLike | None = None, **kwargs: Any) -> "Endpoint":
        """
        Create a new endpoint with extra base parameters.

        Args:
            params: ParameterSet or mapping of extra parameters
            **kwargs: Extra parameters given as keywords

        Returns:
            Endpoint: New endpoint; this one is unchanged
        """
        merged = self._base_params.merged(params).merged(kwargs)
        return Endpoint(self._address, merged)

    def to_config(self) -> EndpointConfig:
        return {"base_url": self.base_url, "params": self._base_params.to_dict()}

    @classmethod
    def from_config(cls, config: EndpointConfig) -> "Endpoint":
        """
        Create an endpoint from a configuration dictionary.

        Args:
            config: Mapping with ``base_url`` and optional ``params`` keys

        Returns:
            Endpoint: New endpoint
        """
        return cls(
            base_url=config.get("base_url"),
            base_params=config.get("params") or {},
        )

    def __repr__(self) -> str:
        return f"Endpoint(base_url='{self.base_url}', params={len(self._base_params)})"


__all__ = [
    "Endpoint",
    "build_url",
    "percent_encode",
    "render_query_string",
    "write_params_as_querystring",
]
