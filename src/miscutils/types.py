"""Type definitions for the miscutils package."""

from typing import Any, TypedDict


class EndpointConfig(TypedDict, total=False):
    """Plain-dict form of an Endpoint."""

    base_url: str
    params: dict[str, Any]


__all__ = ["EndpointConfig"]
