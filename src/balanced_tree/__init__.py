from .avl_tree import AVLTree

__all__ = ["AVLTree"]
