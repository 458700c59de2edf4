"""Singly linked lists and classic two-pointer algorithms on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list; nodes compare by identity."""

    val: Any
    next: ListNode | None = None

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from this node to the end of the list."""
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next


def build_list(values: Iterable[Any]) -> ListNode | None:
    """Build a linked list holding ``values`` in order; empty input gives None."""
    head: ListNode | None = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def get_intersection_node(
    head_a: ListNode | None, head_b: ListNode | None
) -> ListNode | None:
    """Return the first node shared by both lists, or None if they never meet."""
    if head_a is None or head_b is None:
        return None
    a: ListNode | None = head_a
    b: ListNode | None = head_b
    while a is not b:
        a = head_b if a is None else a.next
        b = head_a if b is None else b.next
    return a


def get_middle(head: ListNode | None) -> Any:
    """Return the value of the middle node (the second middle for even lengths)."""
    if head is None:
        raise ValueError("cannot take the middle of an empty list")
    slow: ListNode = head
    fast: ListNode | None = head
    while fast is not None and fast.next is not None:
        assert slow.next is not None
        slow = slow.next
        fast = fast.next.next
    return slow.val


def _reverse(node: ListNode | None) -> ListNode | None:
    previous: ListNode | None = None
    while node is not None:
        node.next, previous, node = previous, node, node.next
    return previous


def is_palindrome(head: ListNode | None) -> bool:
    """Tell whether the list reads the same both ways; the list is left intact."""
    if head is None or head.next is None:
        return True

    slow: ListNode = head
    fast: ListNode | None = head
    while fast is not None and fast.next is not None:
        assert slow.next is not None
        slow = slow.next
        fast = fast.next.next

    tail = _reverse(slow)
    try:
        left: ListNode | None = head
        right = tail
        while right is not None:
            assert left is not None
            if left.val != right.val:
                return False
            left, right = left.next, right.next
        return True
    finally:
        _reverse(tail)