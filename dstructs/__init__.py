"""Classic data structures: a cube value, a doubly-linked list and an AVL tree."""

__version__ = "0.1.0"