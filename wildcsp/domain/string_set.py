"""
Domain: StringSet

Fixed-length collection of strings over the alphabet {0, 1, *} that every
solver works on. The set is validated once when it is built and is never
mutated afterwards; solvers receive it by reference.
"""

from typing import Any, Dict, Iterable, Iterator, Sequence, Tuple

from .errors import DatasetValidationError

ALPHABET = "01*"
BINARY_ALPHABET = "01"
WILDCARD = "*"


class StringSet:
    """
    Entity representing the input of a closest string instance.

    Attributes:
        string_length: Length ``n`` shared by every string (positive)
        data: Tuple with the ``m`` strings, in input order
    """

    __slots__ = ("_string_length", "_data", "_statistics_cache")

    def __init__(self, string_length: int, data: Sequence[str] = ()):
        """
        Build a string set and check its invariants.

        Args:
            string_length: Length every string must have
            data: Strings over {0, 1, *}

        Raises:
            DatasetValidationError: If the length is not positive, a string has
                the wrong length or contains a character outside the alphabet
        """
        self._string_length = string_length
        self._data: Tuple[str, ...] = tuple(data)
        self._statistics_cache = None
        self.validate()

    @classmethod
    def from_strings(cls, strings: Iterable[str]) -> "StringSet":
        """
        Build a set taking the length from the first string.

        Raises:
            DatasetValidationError: If ``strings`` is empty (the length would be
                unknown) or any string is invalid
        """
        strings = list(strings)
        if not strings:
            raise DatasetValidationError(
                "Cannot infer string length from an empty sequence"
            )
        return cls(len(strings[0]), strings)

    @property
    def string_length(self) -> int:
        """Return the length ``n`` of every string."""
        return self._string_length

    @property
    def num_strings(self) -> int:
        """Return the number ``m`` of strings."""
        return len(self._data)

    @property
    def data(self) -> Tuple[str, ...]:
        """Return the strings in input order."""
        return self._data

    def validate(self) -> None:
        """
        Check the fixed-length and alphabet invariants.

        Raises:
            DatasetValidationError: On the first violation found
        """
        if not isinstance(self._string_length, int) or self._string_length < 1:
            raise DatasetValidationError(
                f"String length must be a positive integer, got {self._string_length!r}"
            )

        allowed = set(ALPHABET)
        for index, value in enumerate(self._data):
            if len(value) != self._string_length:
                raise DatasetValidationError(
                    f"String {index} has length {len(value)}, "
                    f"expected {self._string_length}"
                )
            if not allowed.issuperset(value):
                raise DatasetValidationError(
                    f"String {index} contains characters outside '{ALPHABET}': {value!r}"
                )

    def get_statistics(self) -> Dict[str, Any]:
        """
        Return summary statistics of the set.

        Returns:
            dict: ``n``, ``m``, wildcard count and ratio, and per-string
            wildcard counts
        """
        if self._statistics_cache is not None:
            return self._statistics_cache

        per_string = [s.count(WILDCARD) for s in self._data]
        total_chars = self.num_strings * self._string_length
        wildcards = sum(per_string)

        self._statistics_cache = {
            "n": self._string_length,
            "m": self.num_strings,
            "wildcards": wildcards,
            "wildcard_ratio": wildcards / total_chars if total_chars else 0.0,
            "wildcards_per_string": per_string,
        }
        return self._statistics_cache

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __getitem__(self, index: int) -> str:
        return self._data[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StringSet):
            return NotImplemented
        return (
            self._string_length == other._string_length and self._data == other._data
        )

    def __hash__(self) -> int:
        return hash((self._string_length, self._data))

    def __str__(self) -> str:
        return "\n".join(self._data)

    def __repr__(self) -> str:
        return (
            f"StringSet(string_length={self._string_length}, "
            f"num_strings={self.num_strings})"
        )
