"""Group x level symbol matrix of a key.

A key produces a different keysym for each layout group (language or
script variant) and each level (modifier state such as unshifted or
shifted). The matrix is dense and row-major by group:
``data[group * num_levels + level]``.

Matrices are built and edited by a layout loader, frozen, and then shared
by reference between keys. Once frozen a matrix can no longer change, so
readers in any thread see the same symbols.
"""

import threading
from collections.abc import Iterable, Sequence
from typing import Any

from keygeom.exceptions import (
    FrozenMatrixError,
    InvalidDimensionError,
    InvalidKeysymError,
    ShapeMismatchError,
    SymbolIndexError,
)

# Slot has no symbol bound
NO_SYMBOL = 0
VOID_SYMBOL = 0xFFFFFF

_MAX_KEYSYM = 0xFFFFFFFF


def _check_code(code: Any) -> int:
    if isinstance(code, bool) or not isinstance(code, int) or not 0 <= code <= _MAX_KEYSYM:
        raise InvalidKeysymError(code)
    return code


def _check_dimension(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidDimensionError(name, value)
    return value


class KeysymMatrix:
    """Symbol matrix of a key.

    Example:
        matrix = KeysymMatrix([0x61, 0x41], num_groups=1, num_levels=2)
        matrix.get_symbol(0, 1)  # 0x41
        matrix.freeze()
    """

    __slots__ = ("_data", "_num_groups", "_num_levels", "_lock")

    def __init__(self, data: Iterable[int], num_groups: int, num_levels: int) -> None:
        """Create a matrix from flat row-major data.

        Args:
            data: Keysym codes, group after group
            num_groups: Number of groups (rows)
            num_levels: Number of levels (columns)

        Raises:
            ShapeMismatchError: If len(data) != num_groups * num_levels
            InvalidDimensionError: If a dimension is not an integer
            InvalidKeysymError: If a code is not an unsigned 32 bit integer
        """
        _check_dimension("num_groups", num_groups)
        _check_dimension("num_levels", num_levels)
        values = list(data)
        if num_groups < 0 or num_levels < 0 or len(values) != num_groups * num_levels:
            raise ShapeMismatchError(len(values), num_groups, num_levels)
        self._data: list[int] | tuple[int, ...] = [_check_code(c) for c in values]
        self._num_groups = num_groups
        self._num_levels = num_levels
        self._lock = threading.Lock()

    @classmethod
    def empty(cls, num_groups: int, num_levels: int) -> "KeysymMatrix":
        """Create a matrix with every slot set to NO_SYMBOL."""
        _check_dimension("num_groups", num_groups)
        _check_dimension("num_levels", num_levels)
        if num_groups < 0 or num_levels < 0:
            raise ShapeMismatchError(0, num_groups, num_levels)
        return cls([NO_SYMBOL] * (num_groups * num_levels), num_groups, num_levels)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "KeysymMatrix":
        """Create a matrix from one row of levels per group.

        Raises:
            ShapeMismatchError: If rows have different lengths
        """
        num_groups = len(rows)
        num_levels = len(rows[0]) if rows else 0
        if any(len(row) != num_levels for row in rows):
            raise ShapeMismatchError(sum(len(row) for row in rows), num_groups, num_levels)
        data = [code for row in rows for code in row]
        return cls(data, num_groups, num_levels)

    @property
    def num_groups(self) -> int:
        return self._num_groups

    @property
    def num_levels(self) -> int:
        return self._num_levels

    @property
    def data(self) -> tuple[int, ...]:
        """Snapshot of the flat row-major data."""
        return tuple(self._data)

    @property
    def is_frozen(self) -> bool:
        return isinstance(self._data, tuple)

    def _index(self, group: int, level: int) -> int:
        if not (0 <= group < self._num_groups and 0 <= level < self._num_levels):
            raise SymbolIndexError(group, level, self._num_groups, self._num_levels)
        return group * self._num_levels + level

    def get_symbol(self, group: int, level: int) -> int:
        """Return the keysym at (group, level).

        Out of range indices are never clamped or wrapped; the caller
        decides whether to fall back to group or level 0.

        Raises:
            SymbolIndexError: If group or level is outside the matrix
        """
        return self._data[self._index(group, level)]

    def set_symbol(self, group: int, level: int, code: int) -> None:
        """Overwrite the keysym at (group, level).

        Raises:
            SymbolIndexError: If group or level is outside the matrix
            InvalidKeysymError: If code is not an unsigned 32 bit integer
            FrozenMatrixError: If the matrix has been frozen
        """
        index = self._index(group, level)
        code = _check_code(code)
        with self._lock:
            if self.is_frozen:
                raise FrozenMatrixError()
            self._data[index] = code  # type: ignore[index]

    def freeze(self) -> "KeysymMatrix":
        """Make the matrix read-only and return it, ready to be shared."""
        with self._lock:
            if not self.is_frozen:
                self._data = tuple(self._data)
        return self

    def is_bound(self, group: int, level: int) -> bool:
        """True if (group, level) holds a real keysym."""
        return self.get_symbol(group, level) not in (NO_SYMBOL, VOID_SYMBOL)

    def group(self, group: int) -> tuple[int, ...]:
        """Return all levels of one group.

        Raises:
            SymbolIndexError: If group is outside the matrix
        """
        if not 0 <= group < self._num_groups:
            raise SymbolIndexError(group, 0, self._num_groups, self._num_levels)
        start = group * self._num_levels
        return tuple(self._data[start : start + self._num_levels])

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KeysymMatrix):
            return NotImplemented
        return (
            self._num_groups == other._num_groups
            and self._num_levels == other._num_levels
            and tuple(self._data) == tuple(other._data)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        state = "frozen" if self.is_frozen else "mutable"
        return (
            f"KeysymMatrix({self._num_groups}x{self._num_levels}, {state}, "
            f"data={list(self._data)!r})"
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with num_groups, num_levels and flat data
        """
        return {
            "num_groups": self._num_groups,
            "num_levels": self._num_levels,
            "data": list(self._data),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "KeysymMatrix":
        """Deserialize from dictionary.

        Raises:
            InvalidDimensionError: If a dimension is not an integer
            ShapeMismatchError: If the data length does not match the dimensions
        """
        return cls(
            data=data["data"],
            num_groups=data["num_groups"],
            num_levels=data["num_levels"],
        )


def get_symbol(matrix: KeysymMatrix, group: int, level: int) -> int:
    """Return the keysym of matrix at (group, level)."""
    return matrix.get_symbol(group, level)


def set_symbol(matrix: KeysymMatrix, group: int, level: int, code: int) -> None:
    """Overwrite the keysym of matrix at (group, level)."""
    matrix.set_symbol(group, level, code)
