from __future__ import annotations

import typing as tp
from collections.abc import Iterator


@tp.final
class Indexed[R]:
    """
    Index paired with an element handle, unpackable as ``index, element``.

    The index is read-only. An enumeration cursor reuses a single ``Indexed``
    and rebinds it on every advance, so a pair must not be kept past the step
    that produced it.

    Example:
        >>> pair = Indexed(3, "ref")
        >>> index, element = pair
        >>> index, element
        (3, 'ref')
        >>> pair.index = 4
        Traceback (most recent call last):
        ...
        AttributeError: property 'index' of 'Indexed' object has no setter
    """

    __slots__ = ("_index", "_element")
    __match_args__ = ("index", "element")

    def __init__(self, index: int, element: R) -> None:
        self._index = index
        self._element = element

    @property
    def index(self) -> int:
        return self._index

    @property
    def element(self) -> R:
        return self._element

    def _rebind(self, index: int, element: R) -> None:
        self._index = index
        self._element = element

    def __iter__(self) -> Iterator[int | R]:
        yield self._index
        yield self._element

    def __len__(self) -> int:
        return 2

    @tp.overload
    def __getitem__(self, key: tp.Literal[0]) -> int: ...
    @tp.overload
    def __getitem__(self, key: tp.Literal[1]) -> R: ...
    def __getitem__(self, key: int) -> int | R:
        match key:
            case 0 | -2:
                return self._index
            case 1 | -1:
                return self._element
            case _:
                raise IndexError(f"Indexed has exactly two components, got {key=}")

    @tp.override
    def __repr__(self) -> str:
        return f"Indexed(index={self._index!r}, element={self._element!r})"
