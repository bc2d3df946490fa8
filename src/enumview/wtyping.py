import typing as tp


@tp.runtime_checkable
class Cursor[V](tp.Protocol):
    """
    A position within a sequence, able to move forward one element at a time.

    Cursors may also offer ``clone()`` and ``has_value()``; without them a
    cursor is copied with ``copy.copy`` and dereferenced to find out whether
    it points at an element.
    """

    def advance(self) -> None: ...
    def get(self) -> V: ...
    def __eq__(self, other: object, /) -> bool: ...


@tp.runtime_checkable
class MutableCursor[V](Cursor[V], tp.Protocol):
    def set(self, value: V, /) -> None: ...


@tp.runtime_checkable
class Traversable[V](tp.Protocol):
    """Anything with a first and a past-the-last cursor and a known length."""

    def begin(self) -> Cursor[V]: ...
    def end(self) -> Cursor[V]: ...
    def __len__(self) -> int: ...
