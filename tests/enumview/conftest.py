from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

import pytest


@dataclass
class Node[V]:
    value: V
    next: Node[V] | None = None


class NodeCursor[V]:
    """Forward-only cursor: no way to tell its position without walking."""

    def __init__(self, owner: LinkedList[V], node: Node[V] | None) -> None:
        self.owner = owner
        self.node = node

    def advance(self) -> None:
        if self.node is None:
            raise IndexError("advanced past the end of the linked list")
        self.owner.advances += 1
        self.node = self.node.next

    def get(self) -> V:
        if self.node is None:
            raise IndexError("dereferenced the end of the linked list")
        return self.node.value

    def set(self, value: V, /) -> None:
        if self.node is None:
            raise IndexError("dereferenced the end of the linked list")
        self.node.value = value

    def has_value(self) -> bool:
        return self.node is not None

    def clone(self) -> NodeCursor[V]:
        return NodeCursor(self.owner, self.node)

    def __eq__(self, other: object, /) -> bool:
        if not isinstance(other, NodeCursor):
            return NotImplemented
        return self.node is other.node  # pyright: ignore[reportUnknownMemberType]

    __hash__ = None  # pyright: ignore[reportAssignmentType]


class LinkedList[V]:
    def __init__(self, items: Iterable[V] = ()) -> None:
        self.head: Node[V] | None = None
        self.size = 0
        self.advances = 0
        tail: Node[V] | None = None
        for item in items:
            node = Node(item)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node
            self.size += 1

    def begin(self) -> NodeCursor[V]:
        return NodeCursor(self, self.head)

    def end(self) -> NodeCursor[V]:
        return NodeCursor(self, None)

    def __len__(self) -> int:
        return self.size

    def to_list(self) -> list[V]:
        result: list[V] = []
        node = self.head
        while node is not None:
            result.append(node.value)
            node = node.next
        return result


class BareNodeCursor[V]:
    """Only advance, get and ==: no clone, has_value or set."""

    def __init__(self, node: Node[V] | None) -> None:
        self.node = node

    def advance(self) -> None:
        if self.node is None:
            raise IndexError("advanced past the end of the bare list")
        self.node = self.node.next

    def get(self) -> V:
        if self.node is None:
            raise IndexError("dereferenced the end of the bare list")
        return self.node.value

    def __eq__(self, other: object, /) -> bool:
        if not isinstance(other, BareNodeCursor):
            return NotImplemented
        return self.node is other.node  # pyright: ignore[reportUnknownMemberType]

    __hash__ = None  # pyright: ignore[reportAssignmentType]


class BareLinkedList[V](LinkedList[V]):
    def begin(self) -> BareNodeCursor[V]:  # pyright: ignore[reportIncompatibleMethodOverride]
        return BareNodeCursor(self.head)

    def end(self) -> BareNodeCursor[V]:  # pyright: ignore[reportIncompatibleMethodOverride]
        return BareNodeCursor(None)


@pytest.fixture
def make_bare_linked_list() -> Callable[[Iterable[int]], BareLinkedList[int]]:
    return BareLinkedList


@pytest.fixture
def make_linked_list() -> Callable[[Iterable[int]], LinkedList[int]]:
    return LinkedList


@pytest.fixture
def integers_from_0_to_100() -> list[int]:
    return list(range(0, 101))
