import logging
from enum import Enum
from typing import TypeVar, Generic, Callable, Iterable, List, Iterator, Optional

from avl_node import (
    AVLNode,
    balance,
    height,
    is_greater,
    is_less,
    max_node,
    min_node,
    update_height,
)
from avl_rotations import rotate_left, rotate_left_right, rotate_right, rotate_right_left

T = TypeVar('T')

logger = logging.getLogger(__name__)


class EmptyTreeError(ValueError):
    """Raised by min()/max() when the tree holds no elements."""


class DuplicatePolicy(Enum):
    """What add() does with a value equal to one already stored."""
    IGNORE = "ignore"    # keep the stored value, do nothing
    REPLACE = "replace"  # overwrite the stored value in place


class AVLTree(Generic[T]):
    """Self-balancing binary search tree over totally ordered values.

    Every public mutation leaves each node with a balance factor in
    {-1, 0, 1}, so add, remove and find run in O(log n).
    """

    def __init__(
        self,
        values: Optional[Iterable[T]] = None,
        duplicates: DuplicatePolicy = DuplicatePolicy.IGNORE,
    ) -> None:
        self._root: Optional[AVLNode[T]] = None
        self._size: int = 0
        self._duplicates: DuplicatePolicy = duplicates
        if values is not None:
            for value in values:
                self.add(value)

    @classmethod
    def from_value(
        cls, value: T, duplicates: DuplicatePolicy = DuplicatePolicy.IGNORE
    ) -> 'AVLTree[T]':
        tree: AVLTree[T] = cls(duplicates=duplicates)
        tree.add(value)
        return tree

    @property
    def root(self) -> Optional[AVLNode[T]]:
        return self._root

    @property
    def duplicates(self) -> DuplicatePolicy:
        return self._duplicates

    def _add(self, node: Optional[AVLNode[T]], value: T) -> AVLNode[T]:
        if node is None:
            self._size += 1
            return AVLNode(value)

        if is_less(value, node):
            node.left = self._add(node.left, value)
            update_height(node)
            if balance(node) > 1:
                if is_less(value, node.left):
                    return rotate_right(node)
                return rotate_left_right(node)
        elif is_greater(value, node):
            node.right = self._add(node.right, value)
            update_height(node)
            if balance(node) < -1:
                if is_greater(value, node.right):
                    return rotate_left(node)
                return rotate_right_left(node)
        elif self._duplicates is DuplicatePolicy.REPLACE:
            node.value = value

        return node

    def add(self, value: T) -> None:
        self._root = self._add(self._root, value)

    def _remove(self, node: Optional[AVLNode[T]], value: T) -> Optional[AVLNode[T]]:
        if node is None:
            return None

        if is_less(value, node):
            node.left = self._remove(node.left, value)
        elif is_greater(value, node):
            node.right = self._remove(node.right, value)
        elif node.left is not None and node.right is not None:
            # Two children: take over the in-order successor's value, then
            # remove that value from the right subtree.
            successor = min_node(node.right)
            node.value = successor.value
            node.right = self._remove(node.right, successor.value)
        else:
            self._size -= 1
            node = node.left if node.right is None else node.right

        if node is None:
            return None

        update_height(node)
        node_balance = balance(node)

        if node_balance < -1:
            if balance(node.right) > 0:
                return rotate_right_left(node)
            return rotate_left(node)

        if node_balance > 1:
            if balance(node.left) < 0:
                return rotate_left_right(node)
            return rotate_right(node)

        return node

    def remove(self, value: T) -> None:
        self._root = self._remove(self._root, value)

    def find(self, value: T) -> Optional[AVLNode[T]]:
        node = self._root
        while node is not None:
            if is_less(value, node):
                node = node.left
            elif is_greater(value, node):
                node = node.right
            else:
                return node
        return None

    def contains(self, value: T) -> bool:
        return self.find(value) is not None

    def min(self) -> T:
        if self._root is None:
            raise EmptyTreeError("min from empty tree")
        return min_node(self._root).value

    def max(self) -> T:
        if self._root is None:
            raise EmptyTreeError("max from empty tree")
        return max_node(self._root).value

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._root is None

    def clear(self) -> None:
        logger.debug("clearing tree of %d values", self._size)
        self._root = None
        self._size = 0

    def height(self) -> int:
        return height(self._root)

    def in_order(self) -> Iterator[T]:
        stack: List[AVLNode[T]] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def pre_order(self) -> Iterator[T]:
        if self._root is None:
            return
        stack: List[AVLNode[T]] = [self._root]
        while stack:
            node = stack.pop()
            yield node.value
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def post_order(self) -> Iterator[T]:
        stack: List[AVLNode[T]] = []
        node = self._root
        last: Optional[AVLNode[T]] = None
        while stack or node is not None:
            if node is not None:
                stack.append(node)
                node = node.left
                continue
            top = stack[-1]
            if top.right is not None and top.right is not last:
                node = top.right
            else:
                yield top.value
                last = stack.pop()

    def traverse_in_order(self, action: Callable[[T], None]) -> None:
        for value in self.in_order():
            action(value)

    def traverse_pre_order(self, action: Callable[[T], None]) -> None:
        for value in self.pre_order():
            action(value)

    def traverse_post_order(self, action: Callable[[T], None]) -> None:
        for value in self.post_order():
            action(value)

    def get_values_in_order(self) -> List[T]:
        values: List[T] = []
        self.traverse_in_order(values.append)
        return values

    def copy(self) -> 'AVLTree[T]':
        return AVLTree(self.pre_order(), duplicates=self._duplicates)

    def _is_balanced(self, node: Optional[AVLNode[T]]) -> bool:
        if node is None:
            return True
        if abs(balance(node)) > 1:
            return False
        return self._is_balanced(node.left) and self._is_balanced(node.right)

    def is_balanced(self) -> bool:
        return self._is_balanced(self._root)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[T]:
        return self.in_order()

    def __repr__(self) -> str:
        return f"AVLTree({self.get_values_in_order()})"

    def __str__(self) -> str:
        return f"AVLTree(size={self._size}, height={self.height()})"
