from typing import TypeVar, Generic, List, Optional, Tuple

T = TypeVar('T')


class AVLTree(Generic[T]):
    """Self-balancing binary search tree over totally ordered values.

    Every child slot is either None or a node owned solely by its parent.
    Mutations recurse down from the root and rebuild each slot from the
    returned subtree root, so heights are refreshed and rotations applied
    on the way back up without parent links.
    """

    class Node:
        def __init__(self, value: T) -> None:
            self.value: T = value
            self.left: Optional['AVLTree.Node'] = None
            self.right: Optional['AVLTree.Node'] = None
            self.height: int = 0

        def __repr__(self) -> str:
            return f"Node({self.value!r}, height={self.height})"

    def __init__(self) -> None:
        self._root: Optional[AVLTree.Node] = None
        self._size: int = 0

    # -- height bookkeeping -------------------------------------------------

    @staticmethod
    def _height_of(node: Optional[Node]) -> int:
        return -1 if node is None else node.height

    def _refresh_height(self, node: Node) -> None:
        node.height = 1 + max(self._height_of(node.left), self._height_of(node.right))

    def _balance_factor(self, node: Node) -> int:
        return self._height_of(node.left) - self._height_of(node.right)

    # -- rotations ----------------------------------------------------------

    def _rotate_right(self, top: Node) -> Node:
        #       top            pivot
        #      /   \          /     \
        #    pivot  C  -->   A      top
        #    /  \                  /   \
        #   A  inner            inner   C
        pivot = top.left
        assert pivot is not None, "right rotation without a left child"
        top.left = pivot.right
        pivot.right = top

        self._refresh_height(top)
        self._refresh_height(pivot)
        return pivot

    def _rotate_left(self, top: Node) -> Node:
        pivot = top.right
        assert pivot is not None, "left rotation without a right child"
        top.right = pivot.left
        pivot.left = top

        self._refresh_height(top)
        self._refresh_height(pivot)
        return pivot

    def _rebalance(self, node: Node) -> Node:
        balance = self._balance_factor(node)

        if balance > 1:
            heavy = node.left
            assert heavy is not None
            if self._height_of(heavy.left) < self._height_of(heavy.right):
                node.left = self._rotate_left(heavy)
            return self._rotate_right(node)

        if balance < -1:
            heavy = node.right
            assert heavy is not None
            if self._height_of(heavy.right) < self._height_of(heavy.left):
                node.right = self._rotate_right(heavy)
            return self._rotate_left(node)

        return node

    def _settle(self, node: Node) -> Node:
        """Recompute ``node``'s height after a change below it, then rebalance."""
        self._refresh_height(node)
        return self._rebalance(node)

    # -- insertion ----------------------------------------------------------

    def _insert(self, node: Optional[Node], value: T) -> Tuple[Node, bool]:
        if node is None:
            return AVLTree.Node(value), True

        if value < node.value:
            node.left, added = self._insert(node.left, value)
        elif value > node.value:
            node.right, added = self._insert(node.right, value)
        else:
            return node, False

        if not added:
            return node, False
        return self._settle(node), True

    def insert(self, value: T) -> bool:
        """Add ``value``. Returns False, leaving the tree untouched, if it is already stored."""
        self._root, added = self._insert(self._root, value)
        if added:
            self._size += 1
        return added

    # -- deletion -----------------------------------------------------------

    def _take_min(self, node: Optional[Node]) -> Tuple[Optional[Node], T]:
        """Detach the leftmost node under ``node``.

        Returns the rebalanced remainder of the subtree and the detached value.
        """
        assert node is not None, "successor extraction from an empty subtree"
        if node.left is None:
            return node.right, node.value

        node.left, smallest = self._take_min(node.left)
        return self._settle(node), smallest

    def _delete(self, node: Optional[Node], value: T) -> Tuple[Optional[Node], bool]:
        if node is None:
            return None, False

        if value < node.value:
            node.left, removed = self._delete(node.left, value)
        elif value > node.value:
            node.right, removed = self._delete(node.right, value)
        else:
            if node.left is None:
                return node.right, True
            if node.right is None:
                return node.left, True
            node.right, node.value = self._take_min(node.right)
            removed = True

        if not removed:
            return node, False
        return self._settle(node), True

    def delete(self, value: T) -> bool:
        """Remove ``value``. Returns False if it was not stored."""
        self._root, removed = self._delete(self._root, value)
        if removed:
            self._size -= 1
        return removed

    # -- lookup -------------------------------------------------------------

    def contains(self, value: T) -> bool:
        node = self._root
        while node is not None:
            if value == node.value:
                return True
            node = node.left if value < node.value else node.right
        return False

    # -- inspection ---------------------------------------------------------

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._root is None

    def clear(self) -> None:
        self._root = None
        self._size = 0

    def height(self) -> int:
        """Height of the root; a single node has height 0 and an empty tree -1."""
        return self._height_of(self._root)

    def _checked_height(self, node: Optional[Node]) -> Optional[int]:
        # None signals an imbalance or a stale cached height somewhere below.
        if node is None:
            return -1
        left = self._checked_height(node.left)
        right = self._checked_height(node.right)
        if left is None or right is None or abs(left - right) > 1:
            return None
        actual = 1 + max(left, right)
        return actual if actual == node.height else None

    def is_balanced(self) -> bool:
        """True when every node is AVL-balanced and caches its true height."""
        return self._checked_height(self._root) is not None

    def in_order(self) -> List[T]:
        result: List[T] = []
        stack: List[AVLTree.Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.value)
            node = node.right
        return result

    def pre_order(self) -> List[T]:
        result: List[T] = []
        stack: List[AVLTree.Node] = [] if self._root is None else [self._root]
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def __repr__(self) -> str:
        return f"AVLTree({self.in_order()})"

    def __str__(self) -> str:
        return f"AVLTree(size={self._size}, height={self.height()})"
