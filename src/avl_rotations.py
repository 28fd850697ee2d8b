import logging

from avl_node import AVLNode, update_height

logger = logging.getLogger(__name__)


def rotate_right(y: AVLNode) -> AVLNode:
    x = y.left
    assert x is not None
    t2 = x.right

    x.right = y
    y.left = t2

    update_height(y)
    update_height(x)

    logger.debug("rotate right at %r", y.value)
    return x


def rotate_left(x: AVLNode) -> AVLNode:
    y = x.right
    assert y is not None
    t2 = y.left

    y.left = x
    x.right = t2

    update_height(x)
    update_height(y)

    logger.debug("rotate left at %r", x.value)
    return y


def rotate_left_right(node: AVLNode) -> AVLNode:
    """Resolve a left-right zigzag: rotate the left child left, then node right."""
    assert node.left is not None
    node.left = rotate_left(node.left)
    return rotate_right(node)


def rotate_right_left(node: AVLNode) -> AVLNode:
    """Resolve a right-left zigzag: rotate the right child right, then node left."""
    assert node.right is not None
    node.right = rotate_right(node.right)
    return rotate_left(node)
