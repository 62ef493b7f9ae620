"""
Immutable, ordered collection of translation keys.

A TranslationCollection maps translation keys to their default value
(``None`` while unset). Every operation that changes the contents returns a
new collection, so instances can be handed between parsers, the extraction
task and the compilers without copying.

Usage Examples:
    Build a collection from extracted keys:
        >>> collection = TranslationCollection().add_keys(["HELLO", "BYE"])
        >>> collection.keys()
        ['HELLO', 'BYE']

    Merge with values loaded from an existing file:
        >>> existing = TranslationCollection({"HELLO": "Hello"})
        >>> collection.merge(existing).to_dict()
        {'HELLO': 'Hello', 'BYE': None}
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
from types import MappingProxyType
from typing_extensions import override

TranslationValue = str | None


class TranslationCollection:
    """Ordered mapping of translation key to translation value."""

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, TranslationValue] | None = None) -> None:
        self._values: dict[str, TranslationValue] = dict(values) if values else {}

    @property
    def values(self) -> Mapping[str, TranslationValue]:
        """Read-only view of the underlying mapping."""
        return MappingProxyType(self._values)

    def add_key(self, key: str) -> TranslationCollection:
        """Return a collection containing ``key``, leaving an existing value untouched."""
        if key in self._values:
            return self
        return TranslationCollection({**self._values, key: None})

    def add_keys(self, keys: Iterable[str]) -> TranslationCollection:
        """Add each key in order; keys already present keep their value."""
        values = dict(self._values)
        for key in keys:
            _ = values.setdefault(key, None)
        return TranslationCollection(values)

    def add_value(self, key: str, value: TranslationValue) -> TranslationCollection:
        """Return a collection where ``key`` maps to ``value``."""
        return TranslationCollection({**self._values, key: value})

    def merge(self, other: TranslationCollection) -> TranslationCollection:
        """
        Union of both collections.

        Keys keep their position from ``self``; keys only present in
        ``other`` are appended in ``other``'s order. On conflict the first
        non-null value wins: a ``None`` never replaces a value, and a value
        from ``other`` only fills a ``None`` in ``self``.
        """
        values = dict(self._values)
        for key, value in other.items():
            if values.get(key) is None:
                values[key] = value
        return TranslationCollection(values)

    def remove_keys(self, keys: Iterable[str]) -> TranslationCollection:
        """Return a collection without the given keys."""
        removed = set(keys)
        return TranslationCollection(
            {key: value for key, value in self._values.items() if key not in removed}
        )

    def intersect(self, other: TranslationCollection) -> TranslationCollection:
        """Keep only the keys that are also present in ``other``."""
        return TranslationCollection(
            {key: value for key, value in self._values.items() if key in other}
        )

    def filter(
        self, predicate: Callable[[str, TranslationValue], bool]
    ) -> TranslationCollection:
        return TranslationCollection(
            {key: value for key, value in self._values.items() if predicate(key, value)}
        )

    def map(
        self, callback: Callable[[str, TranslationValue], TranslationValue]
    ) -> TranslationCollection:
        """Return a collection with every value replaced by ``callback(key, value)``."""
        return TranslationCollection(
            {key: callback(key, value) for key, value in self._values.items()}
        )

    def for_each(self, callback: Callable[[str, TranslationValue], None]) -> None:
        for key, value in self._values.items():
            callback(key, value)

    def sort(
        self, key: Callable[[str], object] | None = None
    ) -> TranslationCollection:
        """Return a collection ordered by key (code point order unless ``key`` is given)."""
        ordered = sorted(self._values, key=key) if key else sorted(self._values)
        return TranslationCollection({name: self._values[name] for name in ordered})

    def keys(self) -> list[str]:
        return list(self._values)

    def items(self) -> list[tuple[str, TranslationValue]]:
        return list(self._values.items())

    def get(self, key: str) -> TranslationValue:
        return self._values.get(key)

    def has(self, key: str) -> bool:
        return key in self._values

    def is_empty(self) -> bool:
        return not self._values

    def to_dict(self) -> dict[str, TranslationValue]:
        return dict(self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._values))

    def __len__(self) -> int:
        return len(self._values)

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TranslationCollection):
            return NotImplemented
        return self.items() == other.items()

    @override
    def __hash__(self) -> int:
        return hash(tuple(self._values.items()))

    @override
    def __repr__(self) -> str:
        return f"TranslationCollection({self._values!r})"
