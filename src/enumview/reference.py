"""
Handles giving access to a single slot of a sequence.

A handle is bound to one position, so it keeps referring to the same slot
after the enumeration that produced it has moved on.
"""

from __future__ import annotations

import typing as tp

from enumview.cursor import has_value
from enumview.errors import ReadOnlyElementError
from enumview.wtyping import Cursor, MutableCursor


class ConstElementRef[V]:
    """Read-only access to an element.

    Example:
        >>> from enumview.cursor import SequenceCursor
        >>> ref = ConstElementRef(SequenceCursor([7, 8], 1))
        >>> ref.value
        8
        >>> ref.value = 9
        Traceback (most recent call last):
        ...
        enumview.errors.ReadOnlyElementError: cannot assign to element at position 1 of a read-only enumeration
    """

    __slots__ = ("_cursor",)

    def __init__(self, cursor: Cursor[V]) -> None:
        self._cursor = cursor

    def get(self) -> V:
        return self._cursor.get()

    def set(self, value: V, /) -> None:
        raise ReadOnlyElementError(
            f"cannot assign to element at {self._describe()} of a read-only enumeration"
        )

    @property
    def value(self) -> V:
        return self._cursor.get()

    @value.setter
    def value(self, value: V) -> None:
        self.set(value)

    def _describe(self) -> str:
        position = getattr(self._cursor, "position", None)
        return "current position" if position is None else f"position {position}"

    @tp.override
    def __repr__(self) -> str:
        match has_value(self._cursor):
            case False:
                return f"{type(self).__name__}(<past the end>)"
            case None:
                return f"{type(self).__name__}(cursor={self._cursor!r})"
            case True:
                pass
        return f"{type(self).__name__}({self._cursor.get()!r})"


class ElementRef[V](ConstElementRef[V]):
    """Writable access to an element; assignments land in the sequence itself.

    Example:
        >>> from enumview.cursor import SequenceCursor
        >>> data = [7, 8]
        >>> ElementRef(SequenceCursor(data, 0)).value = 70
        >>> data
        [70, 8]
    """

    __slots__ = ()

    _cursor: MutableCursor[V]

    def __init__(self, cursor: MutableCursor[V]) -> None:
        super().__init__(cursor)

    @tp.override
    def set(self, value: V, /) -> None:
        self._cursor.set(value)

    @property
    @tp.override
    def value(self) -> V:  # pyright: ignore[reportIncompatibleVariableOverride]
        return self._cursor.get()

    @value.setter
    def value(self, value: V) -> None:
        self._cursor.set(value)
