"""Singly linked list nodes and algorithms that relink them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: ListNode | None = None

    def __repr__(self) -> str:
        return f"ListNode({self.val!r})"


@dataclass(eq=False, repr=False)
class RandomNode:
    """A list node that also points at an arbitrary node of its list, or nowhere."""

    val: int = 0
    next: RandomNode | None = None
    random: RandomNode | None = None

    def __repr__(self) -> str:
        return f"RandomNode({self.val!r})"


def _nodes(head: ListNode | None) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def _relink(nodes: Sequence[ListNode]) -> ListNode | None:
    """Chain ``nodes`` in the given order, end the chain and return its head."""
    for node, following in zip(nodes, nodes[1:]):
        node.next = following
    if nodes:
        nodes[-1].next = None
        return nodes[0]
    return None


def build_list(values: Iterable[int]) -> ListNode | None:
    """Build a linked list holding ``values`` in order and return its head."""
    return _relink([ListNode(value) for value in values])


def list_values(head: ListNode | None) -> list[int]:
    """Return the values of an acyclic list from ``head`` onwards."""
    return [node.val for node in _nodes(head)]


def add_two_numbers(l1: ListNode | None, l2: ListNode | None) -> ListNode | None:
    """Add two numbers stored as lists of digits, least significant digit first.

    Once one list runs out and nothing is carried, the rest of the other list is
    linked into the result rather than copied.
    """
    sentinel = ListNode()
    tail = sentinel
    carry = 0
    while l1 is not None or l2 is not None:
        if l1 is not None and l2 is not None:
            total = l1.val + l2.val + carry
        else:
            rest = l1 if l1 is not None else l2
            if carry == 0:
                tail.next = rest
                return sentinel.next
            total = rest.val + carry
        tail.next = ListNode(total % 10)
        tail = tail.next
        carry = total // 10
        l1 = l1.next if l1 is not None else None
        l2 = l2.next if l2 is not None else None
    if carry:
        tail.next = ListNode(carry)
    return sentinel.next


def remove_nth_from_end(head: ListNode | None, n: int) -> ListNode | None:
    """Unlink the ``n``-th node counted from the end and return the new head."""
    total = sum(1 for _ in _nodes(head))
    if not 1 <= n <= total:
        raise ValueError(f"n must be between 1 and {total}, got {n}")
    assert head is not None
    if n == total:
        return head.next
    before = head
    for _ in range(total - n - 1):
        assert before.next is not None
        before = before.next
    assert before.next is not None
    before.next = before.next.next
    return head


def merge_k_lists(lists: Iterable[ListNode | None]) -> ListNode | None:
    """Merge sorted lists into one ascending list, reusing their nodes.

    Nodes of equal value come out in the reverse of the order they were met.
    """
    by_value: dict[int, list[ListNode]] = {}
    for head in lists:
        for node in _nodes(head):
            by_value.setdefault(node.val, []).append(node)
    merged = [
        node for value in sorted(by_value) for node in reversed(by_value[value])
    ]
    return _relink(merged)


def reverse_k_group(head: ListNode | None, k: int) -> ListNode | None:
    """Reverse each full group of ``k`` nodes; a short final group stays as it is."""
    if k < 1:
        raise ValueError("k must be at least 1")
    if head is None or k == 1:
        return head
    nodes = list(_nodes(head))
    if len(nodes) < k:
        return head
    full = len(nodes) - len(nodes) % k
    order = [
        node for start in range(0, full, k) for node in reversed(nodes[start : start + k])
    ]
    order.extend(nodes[full:])
    return _relink(order)


def copy_random_list(head: RandomNode | None) -> RandomNode | None:
    """Return a deep copy of a list whose nodes also carry ``random`` links."""
    originals: list[RandomNode] = []
    node = head
    while node is not None:
        originals.append(node)
        node = node.next
    copies: dict[int, RandomNode] = {id(node): RandomNode(node.val) for node in originals}
    for original in originals:
        clone = copies[id(original)]
        clone.next = copies[id(original.next)] if original.next is not None else None
        clone.random = (
            copies[id(original.random)] if original.random is not None else None
        )
    return copies[id(head)] if head is not None else None


def has_cycle(head: ListNode | None) -> bool:
    """Return whether following ``next`` from ``head`` loops forever."""
    slow = fast = head
    while fast is not None and fast.next is not None and fast.next.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def reorder_list(head: ListNode | None) -> None:
    """Relink ``L0, L1, ..., Ln`` in place as ``L0, Ln, L1, Ln-1, ...``."""
    remaining = deque(_nodes(head))
    if len(remaining) <= 2:
        return
    order: list[ListNode] = []
    while remaining:
        order.append(remaining.popleft())
        if remaining:
            order.append(remaining.pop())
    _relink(order)