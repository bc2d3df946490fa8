"""
Cursors driving an enumeration.

``SequenceCursor`` and ``SequenceView`` give any ``collections.abc.Sequence``
the begin/end traversal protocol. ``EnumerateCursor`` wraps an underlying
cursor and tracks the index next to it.
"""

from __future__ import annotations

import copy
import typing as tp
from collections.abc import Callable, MutableSequence, Sequence

from enumview.errors import OutOfRangeError
from enumview.index import Indexed
from enumview.wtyping import Cursor


def clone_cursor[C: Cursor[tp.Any]](cursor: C) -> C:
    clone = getattr(cursor, "clone", None)
    return copy.copy(cursor) if clone is None else clone()


def has_value(cursor: Cursor[tp.Any]) -> bool | None:
    """Whether `cursor` points at an element, or None if it cannot tell."""
    check = getattr(cursor, "has_value", None)
    return None if check is None else check()


@tp.final
class SequenceCursor[V]:
    """
    Position within a sequence.

    Example:
        >>> seq = "ab"
        >>> cursor = SequenceCursor(seq, 0)
        >>> cursor.get()
        'a'
        >>> cursor.advance(); cursor.advance()
        >>> cursor == SequenceCursor(seq, 2)
        True
        >>> cursor.advance()
        Traceback (most recent call last):
        ...
        enumview.errors.OutOfRangeError: cannot advance past the end of a sequence of length 2
    """

    __slots__ = ("_sequence", "_position")

    def __init__(self, sequence: Sequence[V], position: int) -> None:
        self._sequence = sequence
        self._position = position

    @property
    def position(self) -> int:
        return self._position

    def has_value(self) -> bool:
        return 0 <= self._position < len(self._sequence)

    def advance(self) -> None:
        if (length := len(self._sequence)) <= self._position:
            raise OutOfRangeError(
                f"cannot advance past the end of a sequence of length {length}"
            )
        self._position += 1

    def get(self) -> V:
        self._ensure_value()
        return self._sequence[self._position]

    def set(self, value: V, /) -> None:
        self._ensure_value()
        tp.cast(MutableSequence[V], self._sequence)[self._position] = value

    def _ensure_value(self) -> None:
        if not self.has_value():
            raise OutOfRangeError(
                f"no element at position {self._position} "
                f"of a sequence of length {len(self._sequence)}"
            )

    def clone(self) -> SequenceCursor[V]:
        return SequenceCursor(self._sequence, self._position)

    @tp.override
    def __eq__(self, other: object, /) -> bool:
        if not isinstance(other, SequenceCursor):
            return NotImplemented
        return (
            self._sequence is other._sequence  # pyright: ignore[reportUnknownMemberType]
            and self._position == other._position
        )

    __hash__ = None  # pyright: ignore[reportAssignmentType]

    @tp.override
    def __repr__(self) -> str:
        return f"SequenceCursor(position={self._position})"


@tp.final
class SequenceView[V]:
    """Borrowed view of a sequence exposing begin/end cursors."""

    __slots__ = ("sequence",)

    def __init__(self, sequence: Sequence[V]) -> None:
        self.sequence = sequence

    def begin(self) -> SequenceCursor[V]:
        return SequenceCursor(self.sequence, 0)

    def end(self) -> SequenceCursor[V]:
        return SequenceCursor(self.sequence, len(self.sequence))

    def __len__(self) -> int:
        return len(self.sequence)


@tp.final
class EnumerateCursor[V, R]:
    """
    Cursor over ``(index, element)`` pairs.

    The index is counted alongside the underlying cursor rather than derived
    from it, since the underlying cursor may be forward-only. Two cursors are
    equal when their underlying cursors are, whatever their indices.

    Args:
        cursor: underlying cursor, owned by this object from now on
        index: index of the element ``cursor`` points at
        make_ref: builds the element handle for a position
    """

    __slots__ = ("_cursor", "_index", "_make_ref", "_result")

    def __init__(
        self, cursor: Cursor[V], index: int, make_ref: Callable[[Cursor[V]], R]
    ) -> None:
        self._cursor = cursor
        self._index = index
        self._make_ref = make_ref
        self._result = Indexed(index, make_ref(clone_cursor(cursor)))

    @property
    def index(self) -> int:
        return self._index

    def advance(self) -> tp.Self:
        self._cursor.advance()
        self._index += 1
        element = self._make_ref(clone_cursor(self._cursor))
        self._result._rebind(self._index, element)  # pyright: ignore[reportPrivateUsage]
        return self

    def get(self) -> Indexed[R]:
        match has_value(self._cursor):
            case False:
                raise OutOfRangeError(
                    "cannot dereference a cursor past the last element "
                    f"(index {self._index})"
                )
            case None:
                # the underlying cursor raises on its own past the end
                _ = self._cursor.get()
            case True:
                pass
        return self._result

    def clone(self) -> EnumerateCursor[V, R]:
        return EnumerateCursor(clone_cursor(self._cursor), self._index, self._make_ref)

    @tp.override
    def __eq__(self, other: object, /) -> bool:
        if not isinstance(other, EnumerateCursor):
            return NotImplemented
        return self._cursor == other._cursor  # pyright: ignore[reportUnknownMemberType]

    __hash__ = None  # pyright: ignore[reportAssignmentType]

    @tp.override
    def __repr__(self) -> str:
        return f"EnumerateCursor(index={self._index}, cursor={self._cursor!r})"
