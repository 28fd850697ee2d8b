from typing import TypeVar, Generic, Optional

T = TypeVar('T')


class AVLNode(Generic[T]):
    def __init__(self, value: T) -> None:
        self.value: T = value
        self.left: Optional['AVLNode[T]'] = None
        self.right: Optional['AVLNode[T]'] = None
        self.height: int = 1

    def __repr__(self) -> str:
        return f"AVLNode({self.value!r}, height={self.height})"


def height(node: Optional[AVLNode]) -> int:
    if node is None:
        return 0
    return node.height


def update_height(node: AVLNode) -> None:
    node.height = 1 + max(height(node.left), height(node.right))


def balance(node: Optional[AVLNode]) -> int:
    """Left height minus right height; 0 for an absent node."""
    if node is None:
        return 0
    return height(node.left) - height(node.right)


def is_less(value: T, node: Optional[AVLNode[T]]) -> bool:
    if node is None:
        return False
    return value < node.value


def is_greater(value: T, node: Optional[AVLNode[T]]) -> bool:
    if node is None:
        return False
    return value > node.value


def min_node(node: AVLNode[T]) -> AVLNode[T]:
    while node.left is not None:
        node = node.left
    return node


def max_node(node: AVLNode[T]) -> AVLNode[T]:
    while node.right is not None:
        node = node.right
    return node
