"""Singly linked lists and the classic operations on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Optional


class ListNode:
    """A node of a singly linked list."""

    __slots__ = ("val", "next")

    def __init__(self, val: int = 0, next: Optional[ListNode] = None) -> None:
        self.val = val
        self.next = next

    def __repr__(self) -> str:
        return f"ListNode({self.val!r})"


def _nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    """Yield the nodes of an acyclic list, head first."""
    node = head
    while node is not None:
        yield node
        node = node.next


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; empty input gives None."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def list_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of an acyclic list, head first."""
    return [node.val for node in _nodes(head)]


def add_two_numbers(
    l1: Optional[ListNode], l2: Optional[ListNode]
) -> Optional[ListNode]:
    """Add two numbers stored as digit lists, least significant digit first."""
    dummy = ListNode()
    tail = dummy
    carry = 0
    while l1 is not None or l2 is not None or carry:
        total = carry
        if l1 is not None:
            total += l1.val
            l1 = l1.next
        if l2 is not None:
            total += l2.val
            l2 = l2.next
        carry, digit = divmod(total, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    return dummy.next


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Unlink the ``n``-th node counted from the end and return the new head."""
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    dummy = ListNode(0, head)
    start = dummy
    end: Optional[ListNode] = dummy
    for _ in range(n + 1):
        if end is None:
            raise ValueError(f"list is shorter than {n} nodes")
        end = end.next
    while end is not None:
        start = start.next  # type: ignore[assignment]
        end = end.next
    target = start.next
    start.next = target.next  # type: ignore[union-attr]
    return dummy.next


def has_cycle(head: Optional[ListNode]) -> bool:
    """Tell whether the list loops back on itself."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def detect_cycle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the node where the cycle begins, or None if there is no cycle."""
    slow = fast = head
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


def sort_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Sort the list's values in ascending order in place and return the head."""
    nodes = list(_nodes(head))
    for node, value in zip(nodes, sorted(node.val for node in nodes)):
        node.val = value
    return head


def get_intersection_node(
    head_a: Optional[ListNode], head_b: Optional[ListNode]
) -> Optional[ListNode]:
    """Return the first node shared by both lists, or None."""
    seen = {id(node) for node in _nodes(head_a)}
    return next((node for node in _nodes(head_b) if id(node) in seen), None)


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return the new head."""
    prev: Optional[ListNode] = None
    node = head
    while node is not None:
        node.next, prev, node = prev, node, node.next
    return prev


def is_palindrome_list(head: Optional[ListNode]) -> bool:
    """Tell whether the list's values read the same in both directions."""
    values = list_values(head)
    return values == values[::-1]


def delete_node(node: ListNode) -> None:
    """Remove ``node`` from its list by copying its successor over it."""
    successor = node.next
    if successor is None:
        raise ValueError("cannot delete the last node of a list")
    node.val = successor.val
    node.next = successor.next


def odd_even_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Regroup nodes so those at odd positions precede those at even positions."""
    if head is None or head.next is None:
        return head
    odd = head
    even = even_head = head.next
    while even is not None and even.next is not None:
        odd.next = even.next
        odd = odd.next
        even.next = odd.next
        even = even.next
    odd.next = even_head
    return head


def middle_node(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the middle node; of two middles, the second."""
    nodes = list(_nodes(head))
    return nodes[len(nodes) // 2] if nodes else None


def delete_middle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Unlink the middle node and return the head."""
    if head is None or head.next is None:
        return None
    prev = head
    slow = head.next
    fast = head.next.next
    while fast is not None and fast.next is not None:
        prev = slow
        slow = slow.next  # type: ignore[assignment]
        fast = fast.next.next
    prev.next = slow.next
    return head