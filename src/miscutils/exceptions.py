"""miscutils exception hierarchy.

Every failure of the URL helpers is a deterministic validation failure on
caller input. Errors carry a context dictionary so structured logs and
tracebacks show the offending values.

Exception Hierarchy:
    MiscUtilsError (base, also a ValueError)
    ├── InvalidAddress
    ├── InvalidParameters
    └── MalformedResult
"""

from typing import Any, Optional


class MiscUtilsError(ValueError):
    """Base exception for all miscutils errors.

    Subclasses ``ValueError`` so code that already treats bad input as a
    ``ValueError`` keeps catching it.
    """

    def __init__(self, message: str, context: Optional[dict] = None):
        """Initialize miscutils error.

        Args:
            message: Error message
            context: Optional context dictionary for debugging
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        """Return string representation with context."""
        if self.context:
            context_str = "; ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class InvalidAddress(MiscUtilsError):
    """Raised when a base address is absent, blank, or not a usable URL.

    Attributes:
        address: The rejected input, as given
    """

    def __init__(
        self,
        message: str,
        address: Optional[Any] = None,
        context: Optional[dict] = None,
    ):
        if context is None:
            context = {}
        if address is not None:
            context["address"] = str(address)[:200]
        super().__init__(message, context)
        self.address = address


class InvalidParameters(MiscUtilsError):
    """Raised when the parameter set argument itself is absent.

    An empty parameter set is valid; only ``None`` triggers this.

    Attributes:
        argument: Name of the offending argument
    """

    def __init__(
        self,
        message: str,
        argument: Optional[str] = None,
        context: Optional[dict] = None,
    ):
        if context is None:
            context = {}
        if argument:
            context["argument"] = argument
        super().__init__(message, context)
        self.argument = argument


class MalformedResult(MiscUtilsError):
    """Raised when an assembled URL fails the final URL check.

    Attributes:
        url: The assembled URL string
        params: The parameter set the URL was built from
    """

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        params: Optional[Any] = None,
        context: Optional[dict] = None,
    ):
        if context is None:
            context = {}
        if url:
            context["url"] = url[:200]
        super().__init__(message, context)
        self.url = url
        self.params = params


__all__ = [
    "MiscUtilsError",
    "InvalidAddress",
    "InvalidParameters",
    "MalformedResult",
]
