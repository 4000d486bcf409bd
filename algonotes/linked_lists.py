"""Singly linked lists and a few classic two-pointer algorithms over them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list; nodes compare by identity."""

    val: Any
    next: ListNode | None = None

    def __iter__(self) -> Iterator[ListNode]:
        node: ListNode | None = self
        while node is not None:
            yield node
            node = node.next


def _nodes(head: ListNode | None) -> Iterator[ListNode]:
    return iter(head) if head is not None else iter(())


def build_list(values: Iterable[Any]) -> ListNode | None:
    """Build a linked list holding ``values`` in order; empty input gives None."""
    head: ListNode | None = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_list(head: ListNode | None) -> list[Any]:
    """Return the values of the list starting at ``head``."""
    return [node.val for node in _nodes(head)]


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
        raise ValueError("list is empty")
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow.val


def _reverse(node: ListNode | None) -> ListNode | None:
    prev: ListNode | None = None
    while node is not None:
        node.next, prev, node = prev, node, node.next
    return prev


def is_palindrome(head: ListNode | None) -> bool:
    """Tell whether the list reads the same both ways; the list is left intact."""
    if head is None or head.next is None:
        return True
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    tail = _reverse(slow)
    try:
        return all(a.val == b.val for a, b in zip(head, _nodes(tail)))
    finally:
        _reverse(tail)