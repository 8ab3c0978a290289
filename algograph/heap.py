"""
Binary min-heap with a sentinel slot.

The backing list keeps an unused ``None`` at index 0 so that the root sits
at index 1 and the children of ``i`` are ``2i`` and ``2i + 1`` while its
parent is ``i // 2``.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 6 (Heapsort).
"""

from typing import Any, Iterable, Iterator, List, Optional

from .diagnostics import assert_heap_ordered, is_debug_enabled


class BinaryHeap:
    """
    Array-backed binary min-heap.

    Items must be mutually comparable with ``<``. Equal items are allowed.

    Complexity:
        - insert: O(log n)
        - extract_min: O(log n)
        - min: O(1)
        - remove: O(n)
        - from_sequence: O(n)
        - into_sorted_list: O(n log n)
    """

    def __init__(self) -> None:
        self._items: List[Any] = [None]

    @classmethod
    def from_sequence(cls, items: Iterable[Any]) -> "BinaryHeap":
        """
        Build a heap from an iterable using bottom-up heapify.

        Leaves are already valid one-element heaps, so only the internal
        nodes ``n // 2 .. 1`` are bubbled down.

        Args:
            items: Items to place in the heap.

        Returns:
            New heap containing every item.

        Example:
            >>> heap = BinaryHeap.from_sequence([5, 3, 7])
            >>> heap.min()
            3
        """
        heap = cls()
        heap._items.extend(items)
        for index in range(len(heap) // 2, 0, -1):
            heap._bubble_down(index)
        heap._verify()
        return heap

    def __len__(self) -> int:
        return len(self._items) - 1

    def __bool__(self) -> bool:
        return len(self._items) > 1

    def __iter__(self) -> Iterator[Any]:
        """Iterate over items in heap (not sorted) order."""
        return iter(self._items[1:])

    def __repr__(self) -> str:
        return f"BinaryHeap({self._items[1:]!r})"

    def insert(self, item: Any) -> None:
        """
        Add an item to the heap.

        Args:
            item: Item to insert.
        """
        self._items.append(item)
        self._bubble_up(len(self))
        self._verify()

    def min(self) -> Optional[Any]:
        """
        Return the smallest item without removing it.

        Returns:
            Smallest item, or None if the heap is empty.
        """
        if len(self._items) > 1:
            return self._items[1]
        return None

    def extract_min(self) -> Any:
        """
        Remove and return the smallest item.

        Returns:
            Smallest item.

        Raises:
            IndexError: If the heap is empty.
        """
        if len(self._items) <= 1:
            raise IndexError("extract_min from empty heap")
        return self._remove_at(1)

    def remove(self, item: Any) -> bool:
        """
        Remove one occurrence of ``item`` from the heap.

        Args:
            item: Item to remove (compared by equality).

        Returns:
            True if an occurrence was removed, False if none was found.
        """
        for index in range(1, len(self._items)):
            if self._items[index] == item:
                self._remove_at(index)
                return True
        return False

    def into_sorted_list(self) -> List[Any]:
        """
        Drain the heap into an ascending list.

        The heap is empty afterwards.

        Returns:
            Items in ascending order.
        """
        return [self.extract_min() for _ in range(len(self))]

    def check_invariant(self) -> Optional[int]:
        """
        Find the first index that is smaller than its parent.

        Returns:
            Offending index, or None if the heap order holds.
        """
        for index in range(2, len(self._items)):
            if self._items[index] < self._items[index // 2]:
                return index
        return None

    def _remove_at(self, index: int) -> Any:
        last = len(self)
        self._swap(index, last)
        item = self._items.pop()
        if index < len(self._items):
            # The moved item may belong above or below its new slot.
            self._bubble_down(index)
            self._bubble_up(index)
        self._verify()
        return item

    def _bubble_up(self, index: int) -> None:
        items = self._items
        while index > 1:
            parent = index // 2
            if not items[index] < items[parent]:
                break
            self._swap(index, parent)
            index = parent

    def _bubble_down(self, index: int) -> None:
        items = self._items
        size = len(items) - 1
        while True:
            smallest = index
            left = 2 * index
            for child in (left, left + 1):
                if child <= size and items[child] < items[smallest]:
                    smallest = child
            if smallest == index:
                return
            self._swap(index, smallest)
            index = smallest

    def _swap(self, i: int, j: int) -> None:
        self._items[i], self._items[j] = self._items[j], self._items[i]

    def _verify(self) -> None:
        if is_debug_enabled():
            assert_heap_ordered(self)


def heapsort(items: Iterable[Any]) -> List[Any]:
    """
    Sort items ascending with a binary heap.

    Args:
        items: Iterable of mutually comparable items.

    Returns:
        New list with the items in ascending order.

    Complexity: O(n log n).

    Example:
        >>> heapsort([3, 1, 2])
        [1, 2, 3]
    """
    return BinaryHeap.from_sequence(items).into_sorted_list()
