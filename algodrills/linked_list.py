"""Singly linked list drills: building, editing, reversing and cycle detection."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Optional, TextIO


@dataclass(eq=False)
class Node:
    """A node of a singly linked list."""

    value: int
    next: Optional[Node] = field(default=None, repr=False)

    def __iter__(self) -> Iterator[int]:
        """Yield the values from this node to the end of the list."""
        node: Optional[Node] = self
        while node is not None:
            yield node.value
            node = node.next


def from_values(values: Iterable[int]) -> Optional[Node]:
    """Build a list holding ``values`` in order; an empty input gives ``None``."""
    head: Optional[Node] = None
    tail: Optional[Node] = None
    for value in values:
        node = Node(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def to_values(head: Optional[Node]) -> list[int]:
    """Return the values of the list starting at ``head``."""
    return list(head) if head is not None else []


def _nodes(head: Optional[Node]) -> Iterator[Node]:
    node = head
    while node is not None:
        yield node
        node = node.next


def _node_before(head: Node, position: int) -> Optional[Node]:
    """Return the node at 1-based ``position - 1``, or None past the end."""
    for index, node in enumerate(_nodes(head), start=1):
        if index == position - 1:
            return node
    return None


def insert_at_end(head: Optional[Node], value: int) -> Node:
    """Append ``value`` and return the head."""
    new_node = Node(value)
    if head is None:
        return new_node
    *_, last = _nodes(head)
    last.next = new_node
    return head


def delete_at_end(head: Optional[Node]) -> Optional[Node]:
    """Remove the last node and return the head."""
    if head is None or head.next is None:
        return None
    node = head
    while node.next is not None and node.next.next is not None:
        node = node.next
    node.next = None
    return head


def delete_at_position(head: Optional[Node], position: int) -> Optional[Node]:
    """Remove the node at 1-based ``position``; out-of-range positions change nothing."""
    if head is None or position <= 0:
        return head
    if position == 1:
        return head.next
    before = _node_before(head, position)
    if before is None or before.next is None:
        return head
    before.next = before.next.next
    return head


def insert_at_position(head: Optional[Node], position: int, value: int) -> Optional[Node]:
    """Insert ``value`` at 1-based ``position``; out-of-range positions change nothing."""
    if position <= 0:
        return head
    if position == 1:
        return Node(value, head)
    if head is None:
        return head
    before = _node_before(head, position)
    if before is None:
        return head
    before.next = Node(value, before.next)
    return head


def middle_node(head: Optional[Node]) -> Optional[Node]:
    """Return the middle node; for an even length, the second of the two middles."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
    return slow


def reverse(head: Optional[Node]) -> Optional[Node]:
    """Reverse the list in place and return the new head."""
    previous: Optional[Node] = None
    current = head
    while current is not None:
        current.next, previous, current = previous, current, current.next
    return previous


def has_cycle(head: Optional[Node]) -> bool:
    """Return True when following ``next`` from ``head`` never ends."""
    if head is None or head.next is None:
        return False
    slow: Optional[Node] = head
    fast: Optional[Node] = head.next
    while slow is not fast:
        if fast is None or fast.next is None:
            return False
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
    return True


def cycle_start(head: Optional[Node]) -> Optional[Node]:
    """Return the node where a cycle begins, or None when there is no cycle."""
    if head is None or head.next is None:
        return None
    slow: Optional[Node] = head
    fast: Optional[Node] = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
        if slow is fast:
            break
    else:
        return None
    slow = head
    while slow is not fast:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next  # type: ignore[union-attr]
    return slow


def _format(head: Optional[Node]) -> str:
    return "".join(f"{value} " for value in to_values(head))


class _LineReader:
    def __init__(self, stream: TextIO) -> None:
        self._lines = iter(stream)

    def line(self) -> str:
        try:
            return next(self._lines).rstrip("\n")
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def integer(self) -> int:
        while True:
            tokens = self.line().split()
            if tokens:
                return int(tokens[0])


def main(argv: Optional[list[str]] = None) -> int:
    """Run the interactive list-editing session on standard input."""
    parser = argparse.ArgumentParser(
        prog="algodrills-linked-list",
        description="Insert into and delete from linked lists read from standard input.",
    )
    parser.parse_args(argv)
    reader = _LineReader(sys.stdin)

    print("Enter the number of test cases: ", end="")
    cases = reader.integer()
    for _ in range(cases):
        print("Enter the elements: ", end="")
        values = [int(token) for token in reader.line().split()]
        print("Enter the value to be inserted at the end of the linked list: ", end="")
        value = reader.integer()

        head = insert_at_end(from_values(values), value)
        print(f"After insertion at end: {_format(head)}")

        print("Enter the position of the element to be deleted: ", end="")
        position = reader.integer()
        head = delete_at_position(head, position)
        print(f"After deletion at position {position}: {_format(head)}")

        print("Enter the position of the element to be inserted: ", end="")
        position = reader.integer()
        print(f"Enter the value to be inserted at position {position}: ", end="")
        value = reader.integer()
        head = insert_at_position(head, position, value)
        print(f"After insertion at position {position}: {_format(head)}")

        head = delete_at_end(head)
        print(f"Performing deletion at the end: {_format(head)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())