"""URL helper event type constants."""

from enum import Enum


class UrlEvents(str, Enum):
    """Event type constants for structured logging."""

    # Address events
    ADDRESS_VALIDATED = "url.address.validated"
    ADDRESS_REJECTED = "url.address.rejected"

    # Build events
    BUILD_COMPLETED = "url.build.completed"
    BUILD_FAILED = "url.build.failed"

    # Parameter events
    PARAMS_REJECTED = "url.params.rejected"


__all__ = ["UrlEvents"]
