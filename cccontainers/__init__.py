"""Linked lists, red-black tree tables and sets, and stacks with mutable iterators."""

__version__ = "0.1.0"