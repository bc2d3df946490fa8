"""
Index-and-element views over sequences.

Example:
    >>> scores = [10, 20, 30]
    >>> for index, score in enumerate_mutable(scores):
    ...     score.value = index
    >>> scores
    [0, 1, 2]
    >>> [(index, score.value) for index, score in enumerate_readonly(scores)]
    [(0, 0), (1, 1), (2, 2)]
"""

from __future__ import annotations

import logging
import typing as tp
from collections.abc import Callable, Iterator, MutableSequence, Sequence
from operator import attrgetter

from enumview.cursor import EnumerateCursor, SequenceView
from enumview.defaults import MUTABLE, READONLY, Access
from enumview.index import Indexed
from enumview.reference import ConstElementRef, ElementRef
from enumview.wtyping import Cursor, MutableCursor, Traversable

logger = logging.getLogger(__name__)

type Enumerable[V] = Sequence[V] | Traversable[V]

_REF_TYPES: dict[Access, Callable[[tp.Any], ConstElementRef[tp.Any]]] = {
    Access.MUTABLE: ElementRef,
    Access.READONLY: ConstElementRef,
}


def _as_traversable[V](sequence: Enumerable[V]) -> Traversable[V]:
    if isinstance(sequence, Traversable):
        return tp.cast(Traversable[V], sequence)
    if isinstance(sequence, Sequence):
        return SequenceView(sequence)
    raise TypeError(
        f"cannot enumerate {type(sequence).__name__!r} object: "
        "expected a Sequence or an object with begin(), end() and __len__()"
    )


@tp.final
class Enumerator[V, R: ConstElementRef[tp.Any]]:
    """
    View of a sequence as ``(index, element)`` pairs.

    The sequence is borrowed, never copied: it must outlive the enumerator
    and keep its length while a traversal is in progress. Whether elements
    are writable is decided here, once, by ``access``.

    Args:
        sequence: a ``Sequence`` or any ``Traversable``
        access: element access handed out during traversal

    Example:
        >>> letters = Enumerator("abc", READONLY)
        >>> len(letters), list(letters.indices()), list(letters.values())
        (3, [0, 1, 2], ['a', 'b', 'c'])
        >>> letters.begin() == letters.end()
        False
        >>> empty = Enumerator((), READONLY)
        >>> empty.begin() == empty.end()
        True
    """

    __slots__ = ("_traversable", "_make_ref", "access")

    def __init__(self, sequence: Enumerable[V], access: Access) -> None:
        if (
            access is MUTABLE
            and not isinstance(sequence, Traversable)
            and isinstance(sequence, Sequence)
            and not isinstance(sequence, MutableSequence)
        ):
            raise TypeError(
                f"cannot enumerate {type(sequence).__name__!r} object mutably: "
                "it is not a MutableSequence"
            )
        self._traversable: Traversable[V] = _as_traversable(sequence)
        if access is MUTABLE and not isinstance(
            self._traversable.begin(), MutableCursor
        ):
            raise TypeError(
                f"cannot enumerate {type(sequence).__name__!r} object mutably: "
                "its cursors have no set()"
            )
        self._make_ref = tp.cast(Callable[[Cursor[V]], R], _REF_TYPES[access])
        self.access = access
        logger.debug("enumerating %s %s", access.name.lower(), type(sequence).__name__)

    @property
    def sequence(self) -> Enumerable[V]:
        """The enumerated object itself."""
        if isinstance(self._traversable, SequenceView):
            return tp.cast(Sequence[V], self._traversable.sequence)
        return self._traversable

    def begin(self) -> EnumerateCursor[V, R]:
        return EnumerateCursor(self._traversable.begin(), 0, self._make_ref)

    def end(self) -> EnumerateCursor[V, R]:
        length = len(self._traversable)
        logger.debug("end of enumeration at index %d", length)
        return EnumerateCursor(self._traversable.end(), length, self._make_ref)

    def __iter__(self) -> Iterator[Indexed[R]]:
        cursor, end = self.begin(), self.end()
        while cursor != end:
            yield cursor.get()
            _ = cursor.advance()

    def __len__(self) -> int:
        return len(self._traversable)

    def indices(self) -> Iterator[int]:
        return map(attrgetter("index"), self)

    def values(self) -> Iterator[V]:
        cursor, end = self._traversable.begin(), self._traversable.end()
        while cursor != end:
            yield cursor.get()
            cursor.advance()

    def items(self) -> Iterator[tuple[int, V]]:
        """Detached ``(index, element)`` tuples, safe to keep around.

        Example:
            >>> list(enumerate_readonly(["x", "y"]).items())
            [(0, 'x'), (1, 'y')]
        """
        for pair in self:
            yield pair.index, pair.element.get()

    @tp.override
    def __repr__(self) -> str:
        return f"Enumerator({type(self.sequence).__name__}, access={self.access.name})"


def enumerate_mutable[V](
    sequence: MutableSequence[V] | Traversable[V],
) -> Enumerator[V, ElementRef[V]]:
    """Enumerate ``sequence`` with writable element handles.

    Raises:
        TypeError: ``sequence`` is an immutable ``Sequence``, or not a sequence
    """
    return Enumerator(sequence, MUTABLE)


def enumerate_readonly[V](sequence: Enumerable[V]) -> Enumerator[V, ConstElementRef[V]]:
    """Enumerate ``sequence`` with read-only element handles, even if it is mutable."""
    return Enumerator(sequence, READONLY)


@tp.overload
def enumerated[V](sequence: MutableSequence[V]) -> Enumerator[V, ElementRef[V]]: ...
@tp.overload
def enumerated[V](sequence: Enumerable[V]) -> Enumerator[V, ConstElementRef[V]]: ...
def enumerated[V](
    sequence: Enumerable[V],
) -> Enumerator[V, ElementRef[V]] | Enumerator[V, ConstElementRef[V]]:
    """
    Enumerate mutably when ``sequence`` is a ``MutableSequence``, read-only otherwise.

    Other ``Traversable`` objects are always enumerated read-only; use
    ``enumerate_mutable`` for those.

    Example:
        >>> enumerated([1]).access, enumerated((1,)).access
        (<Access.MUTABLE: 1>, <Access.READONLY: 2>)
    """
    if isinstance(sequence, MutableSequence):
        return enumerate_mutable(sequence)
    return enumerate_readonly(sequence)
