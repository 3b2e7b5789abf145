"""Base address validation and normalization.

An address is accepted when it parses as a URI, and after dot-segment
normalization, is also a usable URL: it has a supported scheme and, for
network schemes, a host and a well-formed port.
"""

import re
from dataclasses import dataclass
from urllib.parse import urlsplit

from .events import UrlEvents
from .exceptions import InvalidAddress
from .log_config import get_context_logger
from .settings import get_settings


logger = get_context_logger("miscutils.address")

# RFC 3986 unreserved, reserved and the percent sign
_URI_ASCII_CHARS = re.compile(r"[A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=%]")
_BAD_PERCENT_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")

# Schemes that address a local resource and need no host
_HOSTLESS_SCHEMES = frozenset({"file"})


@dataclass(frozen=True)
class Address:
    """A validated, normalized absolute URI that is also a valid URL.

    Obtain instances through ``validate_address``.
    """

    uri: str

    @property
    def scheme(self) -> str:
        return urlsplit(self.uri).scheme

    @property
    def host(self) -> str | None:
        return urlsplit(self.uri).hostname

    def __str__(self) -> str:
        return self.uri


def remove_dot_segments(path: str) -> str:
    """
    Remove ``.`` and ``..`` segments from an absolute path (RFC 3986 5.2.4).

    Relative paths are returned unchanged.

    Examples:
        >>> remove_dot_segments("/a/./b/../c")
        '/a/c'
        >>> remove_dot_segments("/a/b/..")
        '/a/'
    """
    if not path.startswith("/"):
        return path

    segments = path.split("/")
    resolved: list[str] = []
    for segment in segments:
        if segment == "..":
            # never pop the empty root segment
            if len(resolved) > 1:
                resolved.pop()
        elif segment != ".":
            resolved.append(segment)

    if segments[-1] in (".", ".."):
        resolved.append("")

    return "/".join(resolved)


def normalize_uri(uri: str) -> str:
    """
    Normalize a URI string: lowercase the scheme and resolve dot segments.

    Empty query and fragment markers (a trailing ``?`` or ``#``) are kept.

    Raises:
        ValueError: If the authority cannot be parsed (e.g. unbalanced brackets)
    """
    before_fragment, hash_mark, fragment = uri.partition("#")
    hierarchy, question_mark, query = before_fragment.partition("?")

    parts = urlsplit(hierarchy)
    rest = hierarchy[len(parts.scheme) + 1:] if parts.scheme else hierarchy

    path = remove_dot_segments(parts.path)
    normalized = f"{parts.scheme}:" if parts.scheme else ""
    if rest.startswith("//"):
        normalized += f"//{parts.netloc}"
    elif path.startswith("//"):
        # without an authority a leading "//" would be read as one (RFC 3986 5.3)
        path = f"/.{path}"
    normalized += path
    normalized += f"{question_mark}{query}{hash_mark}{fragment}"
    return normalized


def _syntax_problem(uri: str) -> str | None:
    """Describe why ``uri`` is not a URI expression, or None if it is one."""
    for char in uri:
        if ord(char) > 127:
            if char.isspace() or not char.isprintable():
                return f"illegal character {char!r}"
        elif not _URI_ASCII_CHARS.match(char):
            return f"illegal character {char!r}"

    if _BAD_PERCENT_ESCAPE.search(uri):
        return "malformed percent escape"
    if uri.count("#") > 1:
        return "more than one fragment marker"
    return None


def url_problem(uri: str) -> str | None:
    """
    Describe why ``uri`` is not an acceptable URL, or None if it is one.

    Checks URI syntax, then scheme, host and port.
    """
    problem = _syntax_problem(uri)
    if problem:
        return problem

    try:
        parts = urlsplit(uri)
        # non-numeric or out-of-range ports raise here
        parts.port
    except ValueError as e:
        return str(e)

    if not parts.scheme:
        return "missing scheme"
    if parts.scheme not in get_settings().allowed_schemes:
        return f"unsupported scheme '{parts.scheme}'"
    if parts.scheme not in _HOSTLESS_SCHEMES and not parts.hostname:
        return "missing host"
    return None


def validate_address(uri: "str | Address | None") -> Address:
    """
    Clean, normalize and verify that ``uri`` makes an acceptable URL.

    A syntactically valid but non-normalized URI is accepted and returned in
    normalized form. Validating an Address again yields an equal Address.

    Args:
        uri: Raw address string or an existing Address

    Returns:
        Address: The normalized address

    Raises:
        InvalidAddress: If ``uri`` is None, blank, not a URI, or not a URL
    """
    if uri is None:
        logger.warning(UrlEvents.ADDRESS_REJECTED.value, reason="missing")
        raise InvalidAddress("Address not permitted to be None")

    if isinstance(uri, Address):
        uri = uri.uri

    if not isinstance(uri, str):
        logger.warning(
            UrlEvents.ADDRESS_REJECTED.value, reason="not a string", type=type(uri).__name__
        )
        raise InvalidAddress(f"Address must be a string, not {type(uri).__name__}", address=uri)

    if not uri.strip():
        logger.warning(UrlEvents.ADDRESS_REJECTED.value, reason="blank")
        raise InvalidAddress("Address not permitted to be empty or blank", address=uri)

    problem = _syntax_problem(uri)
    if problem:
        logger.warning(UrlEvents.ADDRESS_REJECTED.value, address=uri, reason=problem)
        raise InvalidAddress(
            f"Address is not a valid URI expression: {problem}", address=uri
        )

    try:
        normalized = normalize_uri(uri)
    except ValueError as e:
        logger.warning(UrlEvents.ADDRESS_REJECTED.value, address=uri, reason=str(e))
        raise InvalidAddress(
            f"Address is not a valid URI expression: {e}", address=uri
        ) from e

    problem = url_problem(normalized)
    if problem:
        logger.warning(UrlEvents.ADDRESS_REJECTED.value, address=uri, reason=problem)
        raise InvalidAddress(
            f"Address is a valid URI but not a valid URL: {problem}", address=uri
        )

    logger.debug(UrlEvents.ADDRESS_VALIDATED.value, address=normalized)
    return Address(normalized)


__all__ = [
    "Address",
    "normalize_uri",
    "remove_dot_segments",
    "url_problem",
    "validate_address",
]
