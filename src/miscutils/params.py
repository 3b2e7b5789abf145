"""Ordered multi-valued query parameter container."""

from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Union

from .exceptions import InvalidParameters


class ParameterSet:
    """
    Ordered mapping of parameter name to an ordered list of values.

    Names keep first-insertion order and each name's values keep insertion
    order. ``None`` values are stored as given and skipped when rendered.

    Examples:
        >>> params = ParameterSet({"a": ["1", "2"]})
        >>> params.add("b", "3")
        >>> list(params.items())
        [('a', ['1', '2']), ('b', ['3'])]
    """

    def __init__(self, initial: Mapping[str, Any] | None = None):
        self._values: dict[str, list[str | None]] = {}
        if initial is not None:
            for name, values in initial.items():
                self.extend(name, values)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, str | None]]) -> "ParameterSet":
        """Build a parameter set from ``(name, value)`` pairs, repeats allowed."""
        params = cls()
        for name, value in pairs:
            params.add(name, value)
        return params

    @classmethod
    def coerce(cls, params: Union["ParameterSet", Mapping[str, Any], None]) -> "ParameterSet":
        """
        Return ``params`` as a ParameterSet without mutating the input.

        Raises:
            InvalidParameters: If ``params`` is None
        """
        if params is None:
            raise InvalidParameters(
                "Parameter set not permitted to be None", argument="params"
            )
        if isinstance(params, ParameterSet):
            return params
        return cls(params)

    def add(self, name: str, value: str | None) -> None:
        """Append one value for ``name``."""
        self._values.setdefault(name, []).append(value)

    def extend(self, name: str, values: Any) -> None:
        """
        Append several values for ``name``.

        A bare string or other scalar counts as a single value. ``None``
        registers the name with no values, which renders to nothing.
        """
        bucket = self._values.setdefault(name, [])
        if values is None:
            return
        if isinstance(values, str) or not isinstance(values, Iterable):
            bucket.append(values)
        else:
            bucket.extend(values)

    def get_all(self, name: str) -> list[str | None]:
        """Values for ``name`` in insertion order, empty if absent."""
        return list(self._values.get(name, []))

    def names(self) -> list[str]:
        return list(self._values)

    def items(self) -> Iterator[tuple[str, list[str | None]]]:
        for name, values in self._values.items():
            yield name, list(values)

    def copy(self) -> "ParameterSet":
        clone = ParameterSet()
        for name, values in self._values.items():
            clone._values[name] = list(values)
        return clone

    def merged(self, other: Union["ParameterSet", Mapping[str, Any], None]) -> "ParameterSet":
        """
        Return a new set with ``other``'s values appended after this set's.

        Names new to this set are added at the end, in ``other``'s order.
        """
        result = self.copy()
        if other is None:
            return result
        for name, values in ParameterSet.coerce(other).items():
            result.extend(name, values)
        return result

    def to_dict(self) -> dict[str, list[str | None]]:
        return {name: list(values) for name, values in self._values.items()}

    def __len__(self) -> int:
        return len(self._values)

    def __bool__(self) -> bool:
        return bool(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._values))

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ParameterSet):
            return list(self.items()) == list(other.items())
        return NotImplemented

    def __repr__(self) -> str:
        return f"ParameterSet({self.to_dict()!r})"


__all__ = ["ParameterSet"]
