"""
miscutils Package

Stateless helpers for building URLs: base address validation and
normalization, ordered multi-valued query parameters, and query string
rendering with UTF-8 form encoding.

This package provides:
- validate_address: Normalize and check a base address
- build_url: Combine an address with query parameters
- render_query_string / percent_encode: Query string rendering
- ParameterSet: Ordered multi-valued parameter container
- Endpoint: Base address with base parameters

Usage:
    from miscutils import build_url, ParameterSet

    url = build_url("https://api.example.com/search", {"q": ["rivers"]})

    params = ParameterSet.from_pairs([("site", "01"), ("site", "02")])
    url = build_url("https://api.example.com/sites?format=json", params)
"""

from .address import Address, validate_address
from .exceptions import (
    InvalidAddress,
    InvalidParameters,
    MalformedResult,
    MiscUtilsError,
)
from .log_config import configure_logging, get_context_logger
from .params import ParameterSet
from .settings import MiscUtilsSettings, get_settings, reload_settings
from .url_builder import (
    Endpoint,
    build_url,
    percent_encode,
    render_query_string,
    write_params_as_querystring,
)

__version__ = "1.0.0"

__all__ = [
    # URL building
    "validate_address",
    "build_url",
    "render_query_string",
    "percent_encode",
    "write_params_as_querystring",
    # Types
    "Address",
    "ParameterSet",
    "Endpoint",
    # Errors
    "MiscUtilsError",
    "InvalidAddress",
    "InvalidParameters",
    "MalformedResult",
    # Configuration and logging
    "MiscUtilsSettings",
    "get_settings",
    "reload_settings",
    "configure_logging",
    "get_context_logger",
    # Package metadata
    "__version__",
]
