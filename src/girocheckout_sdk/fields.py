"""Ordered request fields.

The order in which fields are set is the order in which their values are
fed to the request hash, so fields are kept as an explicit list of pairs.
"""

from typing import Iterable, Iterator, List, Optional, Tuple, Union

FieldValue = Optional[Union[str, int, bool]]


def stringify(value: FieldValue) -> str:
    """Render a field value as wire text.

    bool -> "1"/"0", int -> decimal text, str -> unchanged, None -> "".
    """
    if value is None:
        return ""
    # bool is a subclass of int, check it first
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        return value
    raise TypeError(
        f"Unsupported field value type {type(value).__name__!r}; "
        "expected str, int or bool"
    )


class FieldSet:
    """Ordered mapping of field name to non-empty string value."""

    def __init__(self):
        self._pairs: List[Tuple[str, str]] = []
        self._positions = {}

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, FieldValue]]) -> "FieldSet":
        field_set = cls()
        for name, value in pairs:
            field_set.set(name, value)
        return field_set

    def set(self, name: str, value: FieldValue) -> bool:
        """Set a field, returning True if it was stored.

        Absent or empty values are skipped. Setting a name that is already
        present replaces its value but keeps its original position.
        """
        text = stringify(value)
        if not text:
            return False
        position = self._positions.get(name)
        if position is None:
            self._positions[name] = len(self._pairs)
            self._pairs.append((name, text))
        else:
            self._pairs[position] = (name, text)
        return True

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        position = self._positions.get(name)
        if position is None:
            return default
        return self._pairs[position][1]

    def names(self) -> List[str]:
        return [name for name, _ in self._pairs]

    def values(self) -> List[str]:
        return [value for _, value in self._pairs]

    def items(self) -> List[Tuple[str, str]]:
        return list(self._pairs)

    def copy(self) -> "FieldSet":
        return FieldSet.from_pairs(self._pairs)

    def __contains__(self, name: object) -> bool:
        return name in self._positions

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(list(self._pairs))

    def __len__(self) -> int:
        return len(self._pairs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldSet):
            return NotImplemented
        return self._pairs == other._pairs

    def __repr__(self) -> str:
        return f"FieldSet({self._pairs!r})"
