"""English-Russian dictionary and command interpreter built on AVL tree sets and maps."""

__version__ = "1.0.0"
__all__ = ["avl_tree", "avl_set", "avl_map", "dictionary", "commands"]