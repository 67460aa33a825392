"""
Ordered multimap of NVP protocol fields.

Request and response payloads are both flat lists of ``KEY=VALUE`` pairs where
a key may repeat (line items, indexed errors). Keys are kept exactly as given,
order is preserved so encoded bodies are deterministic.
"""

from collections.abc import Iterable, Iterator, Mapping
from typing import Any
from urllib.parse import urlencode


class FieldMultimap:
    """Ordered ``(key, value)`` pairs with dict-like helpers."""

    __slots__ = ("_pairs",)

    def __init__(
        self,
        data: Mapping[str, Any] | Iterable[tuple[str, Any]] | None = None,
        **fields: Any,
    ):
        self._pairs: list[tuple[str, str]] = []
        if data is not None:
            self.update(data)
        if fields:
            self.update(fields)

    def add(self, key: str, value: Any) -> None:
        """Append a value, keeping any existing values for ``key``."""
        self._pairs.append((key, str(value)))

    def set(self, key: str, value: Any) -> None:
        """Replace every value of ``key`` with a single value appended at the end."""
        self.remove(key)
        self._pairs.append((key, str(value)))

    def remove(self, key: str) -> None:
        self._pairs = [(k, v) for k, v in self._pairs if k != key]

    def update(self, data: Mapping[str, Any] | Iterable[tuple[str, Any]]) -> None:
        """
        Add pairs from a mapping or an iterable of pairs.

        Mapping values that are lists or tuples become repeated keys.
        """
        if isinstance(data, FieldMultimap):
            self._pairs.extend(data._pairs)
            return
        items = data.items() if isinstance(data, Mapping) else data
        for key, value in items:
            if isinstance(value, (list, tuple)):
                for item in value:
                    self.add(key, item)
            else:
                self.add(key, value)

    def get(self, key: str, default: str = "") -> str:
        """First value for ``key``, or ``default`` when absent."""
        for k, v in self._pairs:
            if k == key:
                return v
        return default

    def getlist(self, key: str) -> list[str]:
        return [v for k, v in self._pairs if k == key]

    def keys(self) -> list[str]:
        """Distinct keys in order of first appearance."""
        return list(dict.fromkeys(k for k, _ in self._pairs))

    def items(self) -> list[tuple[str, str]]:
        return list(self._pairs)

    def to_dict(self) -> dict[str, list[str]]:
        grouped: dict[str, list[str]] = {}
        for key, value in self._pairs:
            grouped.setdefault(key, []).append(value)
        return grouped

    def copy(self) -> "FieldMultimap":
        return FieldMultimap(self._pairs)

    def encode(self) -> str:
        """Encode as an ``application/x-www-form-urlencoded`` body."""
        return urlencode(self._pairs)

    def __contains__(self, key: object) -> bool:
        return any(k == key for k, _ in self._pairs)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __len__(self) -> int:
        # pairs, not distinct keys
        return len(self._pairs)

    def __bool__(self) -> bool:
        return bool(self._pairs)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FieldMultimap):
            return self.to_dict() == other.to_dict()
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"FieldMultimap({self._pairs!r})"
