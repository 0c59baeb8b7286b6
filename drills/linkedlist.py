"""Singly linked lists and the classic exercises on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list; nodes compare by identity."""

    val: int
    next: ListNode | None = None

    @classmethod
    def from_iterable(cls, values: Iterable[int]) -> ListNode | None:
        """Build a chain of nodes holding ``values`` in order; None if empty."""
        dummy = cls(0)
        tail = dummy
        for value in values:
            tail.next = cls(value)
            tail = tail.next
        return dummy.next

    def __iter__(self) -> Iterator[int]:
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next


class LinkedList:
    """A singly linked list that tracks its head, tail and length."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: ListNode | None = None
        self._tail: ListNode | None = None
        self._length = 0
        for value in values:
            self.push_back(value)

    @property
    def head(self) -> ListNode | None:
        return self._head

    def push_front(self, value: int) -> None:
        """Insert ``value`` before the current head."""
        node = ListNode(value, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._length += 1

    def push_back(self, value: int) -> None:
        """Append ``value`` after the current tail."""
        node = ListNode(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._length += 1

    def delete(self, key: int) -> None:
        """Remove the first node holding ``key``; KeyError if there is none."""
        prev: ListNode | None = None
        node = self._head
        while node is not None and node.val != key:
            prev, node = node, node.next
        if node is None:
            raise KeyError(key)
        if prev is None:
            self._head = node.next
        else:
            prev.next = node.next
        if node is self._tail:
            self._tail = prev
        self._length -= 1

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[int]:
        if self._head is not None:
            yield from self._head

    def __str__(self) -> str:
        return "".join(f"{value} -> " for value in self)

    def display(self) -> str:
        """Print the list as ``a -> b -> `` on one line and return that line."""
        parts = []
        node = self._head
        while node is not None:
            parts.append(f"{node.val} -> ")
            node = node.next
        line = "".join(parts)
        print(line)
        return line


def add_two_numbers(l1: ListNode | None, l2: ListNode | None) -> ListNode | None:
    """Add two numbers stored as little-endian digit lists."""
    dummy = ListNode(0)
    tail = dummy
    carry = 0
    while l1 is not None or l2 is not None:
        if l1 is not None:
            carry += l1.val
            l1 = l1.next
        if l2 is not None:
            carry += l2.val
            l2 = l2.next
        carry, digit = divmod(carry, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    if carry > 0:
        tail.next = ListNode(carry)
    return dummy.next


def get_intersection_node(
    head_a: ListNode | None, head_b: ListNode | None
) -> ListNode | None:
    """Return the first node shared by both lists, or None."""
    if head_a is None or head_b is None:
        return None
    pa: ListNode | None = head_a
    pb: ListNode | None = head_b
    while pa is not pb:
        pa = head_b if pa is None else pa.next
        pb = head_a if pb is None else pb.next
    return pa


def merge_two_lists(list1: ListNode | None, list2: ListNode | None) -> ListNode | None:
    """Splice two sorted lists into one sorted list."""
    dummy = ListNode(0)
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.val < list2.val:
            tail.next, list1 = list1, list1.next
        else:
            tail.next, list2 = list2, list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return dummy.next


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse a list in place and return its new head."""
    prev: ListNode | None = None
    while head is not None:
        head.next, prev, head = prev, head, head.next
    return prev


def is_palindrome_list(head: ListNode | None) -> bool:
    """Tell whether the values read the same both ways.

    The second half of the list is reversed in place.
    """
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    second = reverse_list(slow)
    first = head
    while second is not None:
        if first.val != second.val:
            return False
        first = first.next
        second = second.next
    return True


def delete_duplicates(head: ListNode | None) -> ListNode | None:
    """Drop nodes whose value equals that of the node before them."""
    node = head
    while node is not None and node.next is not None:
        if node.next.val == node.val:
            node.next = node.next.next
        else:
            node = node.next
    return head


def remove_elements(head: ListNode | None, val: int) -> ListNode | None:
    """Remove every node holding ``val``."""
    dummy = ListNode(0, head)
    prev = dummy
    node = head
    while node is not None:
        if node.val == val:
            prev.next = node.next
        else:
            prev = node
        node = node.next
    return dummy.next